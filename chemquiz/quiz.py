"""
Multiple-Choice Quiz Generation

Builds one quiz question from a list of compounds. Depending on the mode the
learner either sees a name and picks the matching structure, or sees a
structure and picks the matching name.

All randomness comes from the ``rng`` argument, so a seeded
``random.Random`` reproduces the same question:

    >>> rng = random.Random(42)
    >>> item = generate_quiz(rng, compounds, QuizMode.NAME_TO_STRUCTURE, 4)

Author: ChemQuiz Development Team
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, MutableSequence, Optional, Protocol, Sequence

from chemquiz.chemdata.compounds import Compound

MIN_OPTION_COUNT = 2


# ==============================================================================
# Errors
# ==============================================================================

class QuizError(Exception):
    """Base class for quiz generation failures."""


class OptionCountTooSmallError(QuizError):
    def __init__(self):
        super().__init__(f"option count must be at least {MIN_OPTION_COUNT}")


class NotEnoughCompoundsError(QuizError):
    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"requires at least {required} compounds but only {available} provided"
        )


class InsufficientUniqueOptionsError(QuizError):
    def __init__(self, required: int, unique: int):
        self.required = required
        self.unique = unique
        super().__init__(
            f"requires at least {required} unique options but only {unique} available"
        )


# ==============================================================================
# Modes and Items
# ==============================================================================

class QuizMode(Enum):
    """Relationship between the prompt and the answer options."""
    NAME_TO_STRUCTURE = "name_to_structure"  # prompt: name, options: structures
    STRUCTURE_TO_NAME = "structure_to_name"  # prompt: structure, options: names

    def option_label(self, compound: Compound) -> str:
        if self is QuizMode.NAME_TO_STRUCTURE:
            return compound.display_structure()
        return compound.display_name()

    def prompt_label(self, compound: Compound) -> str:
        if self is QuizMode.NAME_TO_STRUCTURE:
            return compound.display_name()
        return compound.display_structure()


@dataclass
class QuizItem:
    """A single generated quiz question."""
    mode: QuizMode
    prompt: str
    options: List[str]
    correct_index: int
    answer: Optional[Compound] = field(default=None, repr=False, compare=False)  # compound behind the prompt

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]

    def is_correct(self, index: int) -> bool:
        return index == self.correct_index

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mode': self.mode.value,
            'prompt': self.prompt,
            'options': list(self.options),
            'correct_index': self.correct_index,
        }


class RandomSource(Protocol):
    """The subset of ``random.Random`` the generator relies on."""

    def shuffle(self, x: MutableSequence[Any]) -> None: ...

    def randrange(self, stop: int) -> int: ...


# ==============================================================================
# Generator
# ==============================================================================

def generate_quiz(
    rng: RandomSource,
    compounds: Sequence[Compound],
    mode: QuizMode,
    option_count: int,
) -> QuizItem:
    """
    Generate a quiz item for the given compounds and mode.

    Compounds whose option text would be identical count as one choice, the
    first occurrence wins.

    Args:
        rng: Random source, e.g. ``random.Random(seed)``
        compounds: Candidate compounds
        mode: Quiz mode
        option_count: Number of answer options to show

    Returns:
        QuizItem with exactly ``option_count`` distinct options

    Raises:
        OptionCountTooSmallError: ``option_count`` is below 2
        NotEnoughCompoundsError: fewer compounds than requested options
        InsufficientUniqueOptionsError: too few distinct option labels
    """
    if option_count < MIN_OPTION_COUNT:
        raise OptionCountTooSmallError()

    if len(compounds) < option_count:
        raise NotEnoughCompoundsError(required=option_count, available=len(compounds))

    seen = set()
    unique_indices = []
    for idx, compound in enumerate(compounds):
        label = mode.option_label(compound)
        if label not in seen:
            seen.add(label)
            unique_indices.append(idx)

    if len(unique_indices) < option_count:
        raise InsufficientUniqueOptionsError(required=option_count, unique=len(unique_indices))

    selected = list(unique_indices)
    rng.shuffle(selected)
    selected = selected[:option_count]

    correct_compound_index = selected[0]

    # Second shuffle so the correct answer is not tied to the first sampled slot
    options = [(idx, mode.option_label(compounds[idx])) for idx in selected]
    rng.shuffle(options)

    correct_index = next(
        position for position, (idx, _) in enumerate(options)
        if idx == correct_compound_index
    )

    return QuizItem(
        mode=mode,
        prompt=mode.prompt_label(compounds[correct_compound_index]),
        options=[text for _, text in options],
        correct_index=correct_index,
        answer=compounds[correct_compound_index],
    )
