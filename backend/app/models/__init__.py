from app.models.user import User
from app.models.catalog import Exercise, RPEScaleValue
from app.models.trainer import TrainerClientLink, LinkStatus
from app.models.workout import Workout
from app.models.prescription import PrescriptionGroup, ExercisePrescription, PrescriptionType
from app.models.session import WorkoutSession, SessionBlock
from app.models.exercise_log import SessionExerciseLog
from app.models.session_set import SessionSet

__all__ = [
    "User",
    "Exercise", "RPEScaleValue",
    "TrainerClientLink", "LinkStatus",
    "Workout",
    "PrescriptionGroup", "ExercisePrescription", "PrescriptionType",
    "WorkoutSession", "SessionBlock",
    "SessionExerciseLog",
    "SessionSet",
]
