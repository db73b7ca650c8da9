"""Manual workout entry via interactive questionnaire."""

from dataclasses import dataclass, field
from datetime import date

import questionary
from questionary import Style

from ...models.workout import CardioSub, Category, GymSub
from ...utils.dates import is_iso_date, to_iso

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)


@dataclass
class WorkoutEntry:
    """Answers collected for one workout."""

    date: str
    categories: list[str]
    gym_subs: list[str] = field(default_factory=list)
    cardio_subs: list[str] = field(default_factory=list)
    notes: str = ""


def _validate_date(text: str) -> bool | str:
    return True if is_iso_date(text) else "Use the YYYY-MM-DD format"


class ManualEntryClient:
    """Interactive questionnaire for logging a workout."""

    async def collect_entry(
        self, default_date: date | None = None
    ) -> WorkoutEntry | None:
        """Ask for the date, categories, sub-categories and notes.

        Returns:
            The answers, or None if the user cancelled a prompt
        """
        if default_date is None:
            default_date = date.today()

        workout_date = await questionary.text(
            "Workout date (YYYY-MM-DD):",
            default=to_iso(default_date),
            validate=_validate_date,
            style=custom_style,
        ).ask_async()
        if not workout_date:
            return None

        categories = await questionary.checkbox(
            "What did you do? (Select all that apply)",
            choices=[questionary.Choice(c.value, c.value) for c in Category],
            validate=lambda selected: bool(selected) or "Select at least one category",
            style=custom_style,
        ).ask_async()
        if not categories:
            return None

        gym_subs: list[str] = []
        if Category.GYM.value in categories:
            gym_subs = await questionary.checkbox(
                "Which muscle groups?",
                choices=[questionary.Choice(s.value, s.value) for s in GymSub],
                style=custom_style,
            ).ask_async()
            if gym_subs is None:
                return None

        cardio_subs: list[str] = []
        if Category.CARDIO.value in categories:
            cardio_subs = await questionary.checkbox(
                "Which kind of cardio?",
                choices=[questionary.Choice(s.value, s.value) for s in CardioSub],
                style=custom_style,
            ).ask_async()
            if cardio_subs is None:
                return None

        notes = await questionary.text(
            "Notes (optional):",
            default="",
            style=custom_style,
        ).ask_async()
        if notes is None:
            return None

        return WorkoutEntry(
            date=workout_date,
            categories=categories,
            gym_subs=gym_subs,
            cardio_subs=cardio_subs,
            notes=notes,
        )
