"""Seed the default habit catalogue offered by /habits/initialize."""

from fitpoints.database import SessionLocal, engine, Base
from fitpoints import models  # noqa: F401
from fitpoints.models import Habit

DEFAULT_HABITS = [
    ("Drink 2L of water", "Spread across the day", 1),
    ("Walk 8000 steps", None, 2),
    ("Sleep 7+ hours", None, 2),
    ("Eat vegetables with lunch and dinner", None, 1),
    ("Complete today's workout", "From your assigned training plan", 3),
    ("Stretch for 10 minutes", None, 1),
]


def seed_default_habits():
    """Insert the default habits that are not there yet, matched by name."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        existing = {
            name for (name,) in db.query(Habit.name).filter(Habit.is_default == True).all()
        }
        
        added = 0
        for name, description, points in DEFAULT_HABITS:
            if name in existing:
                print(f"⊘ Already present, skipping: {name}")
                continue
            db.add(Habit(name=name, description=description, points=points, is_default=True))
            added += 1
            print(f"✓ Added: {name} ({points} pts)")
        
        db.commit()
        print(f"\n✓ Seeding complete, {added} habits added")
    finally:
        db.close()


if __name__ == "__main__":
    seed_default_habits()
