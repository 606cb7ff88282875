#!/usr/bin/env python
"""
Seed onboarding cards for local development.
"""

import argparse
import asyncio
import sys

from sqlalchemy import func, select


# Add src to path for imports
sys.path.insert(0, "src")

from compass.core.database import session_scope
from compass.modules.cards.models import Card
from compass.modules.cards.repos import CardRepository


WELCOME_CARDS = [
    {
        "type": "text",
        "title": "Welcome aboard",
        "content": "Swipe through these cards to get set up in a few minutes.",
    },
    {
        "type": "image",
        "title": "Find your way around",
        "content": "The sidebar holds every channel you have access to.",
        "media_url": "https://placehold.co/1200x600/png",
        "media_mime_type": "image/png",
    },
    {
        "type": "video",
        "title": "A quick tour",
        "content": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    },
]

DEMO_TENANTS = ["biz_demo_acme", "biz_demo_globex", "biz_demo_initech"]


async def seed_tenant(tenant_id: str) -> None:
    """Create the welcome cards for one tenant unless it already has cards."""
    async with session_scope() as session:
        result = await session.execute(
            select(func.count()).select_from(Card).where(Card.tenant_id == tenant_id)
        )
        existing = result.scalar_one()

        if existing:
            print(f"Tenant {tenant_id} already has {existing} cards")
            return

        repo = CardRepository(session)
        for data in WELCOME_CARDS:
            card = await repo.create(Card(tenant_id=tenant_id, created_by="seed", **data))
            print(f"Created card {card.id} for {tenant_id} at order {card.order}")


async def main(scenario: str, tenant_id: str) -> None:
    """Run the seeding based on scenario."""
    if scenario == "default":
        await seed_tenant(tenant_id)
    elif scenario == "demo":
        for tenant in DEMO_TENANTS:
            await seed_tenant(tenant)
    else:
        print(f"Unknown scenario: {scenario}")
        print("Available scenarios: default, demo")
        sys.exit(1)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed database with onboarding cards")
    parser.add_argument(
        "--scenario",
        "-s",
        default="default",
        help="Seed scenario to run (default, demo)",
    )
    parser.add_argument(
        "--tenant",
        "-t",
        default="biz_default",
        help="Tenant id for the default scenario",
    )
    args = parser.parse_args()

    asyncio.run(main(args.scenario, args.tenant))
