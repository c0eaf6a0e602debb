"""Initialize the catalog tables."""

from database.postgres import create_all_tables

if __name__ == "__main__":
    print("Creating catalog tables...")
    try:
        create_all_tables()
        print("✅ Catalog tables created successfully!")
    except Exception as e:
        print(f"❌ Error creating tables: {e}")
        raise
