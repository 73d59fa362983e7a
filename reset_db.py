# reset_db.py
from lifedash.models import database  # Make sure this imports your Base
from lifedash.models.database import engine
from lifedash.models import Document  # noqa: F401  registers the documents table

if __name__ == "__main__":
    print("⚠️ Dropping all existing tables...")
    database.Base.metadata.drop_all(bind=engine)

    print("✅ Recreating tables from models...")
    database.Base.metadata.create_all(bind=engine)

    print("✅ Database reset complete.")
