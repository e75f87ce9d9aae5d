from enum import Enum


class ExerciseCategory(str, Enum):
    UNSPECIFIED = "Unspecified"
    BODY_WEIGHT = "BodyWeight"
    FREE_WEIGHT = "FreeWeight"
    EQUIPMENT = "Equipment"


class LogStatus(str, Enum):
    IN_PROGRESS = "InProgress"  # Initial
    COMPLETED = "Completed"  # Terminal
    CANCELLED = "Cancelled"  # Terminal

    @property
    def label(self) -> str:
        """Human wording used in error messages ("completed", "cancelled", ...)."""
        return {
            LogStatus.IN_PROGRESS: "in progress",
            LogStatus.COMPLETED: "completed",
            LogStatus.CANCELLED: "cancelled",
        }[self]


# Categories offered to clients when creating exercises
SELECTABLE_CATEGORIES: list[ExerciseCategory] = [
    category for category in ExerciseCategory if category != ExerciseCategory.UNSPECIFIED
]
