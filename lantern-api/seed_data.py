#!/usr/bin/env python3
"""Seed development data: an organization, a project and an API key pair"""
from dotenv import load_dotenv

load_dotenv()

from app.core.database import SessionLocal, init_db  # noqa: E402
from app.models import ApiKey, Organization, PlanType, Project  # noqa: E402


def seed_test_data():
    """Create a test organization, project and API key for development."""
    init_db()
    db = SessionLocal()

    try:
        test_org = Organization(name="Test Organization", plan=PlanType.PRO)
        db.add(test_org)
        db.flush()

        test_project = Project(
            org_id=test_org.id,
            name="Test LLM App",
            description="Development testing project",
        )
        db.add(test_project)
        db.flush()

        api_key, secret_key = ApiKey.generate(test_project.id)
        db.add(api_key)
        db.commit()

        print("=" * 60)
        print("✅ Created Test Project")
        print("=" * 60)
        print(f"Organization ID: {test_org.id}")
        print(f"Project ID: {test_project.id}")
        print(f"Name: {test_project.name}")
        print()
        print("Use this API key pair for the public API (shown once):")
        print(f"  Public key: {api_key.public_key}")
        print(f"  Secret key: {secret_key}")
        print("=" * 60)

    except Exception as e:
        print(f"❌ Error creating test data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    print("\n🚀 Seeding test data...\n")
    seed_test_data()
    print("\n✅ Seed data complete!\n")
