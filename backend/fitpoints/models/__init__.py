"""Database models package."""

from fitpoints.models.user import User
from fitpoints.models.habit import Habit, UserHabit
from fitpoints.models.habit_completion import HabitCompletion
from fitpoints.models.weekly_points import WeeklyPoints
from fitpoints.models.training_plan import TrainingPlan, PlanExercise
from fitpoints.models.student import Student
from fitpoints.models.daily_note import DailyNote

__all__ = [
    "User",
    "Habit",
    "UserHabit",
    "HabitCompletion",
    "WeeklyPoints",
    "TrainingPlan",
    "PlanExercise",
    "Student",
    "DailyNote",
]
