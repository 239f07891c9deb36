"""Applying label deltas to an issue's label set."""

from labelbot.commands.models import DeltaKind, LabelDelta
from labelbot.events.models import Label


def resolve_deltas(
    labels: list[Label], deltas: list[LabelDelta]
) -> tuple[list[Label], bool]:
    """Apply deltas in order to a copy of the label set.

    Adding a label that is present, or removing one that is absent, is a
    no-op. Replaying a command against its own result therefore reports no
    change.

    Args:
        labels: Current labels; not modified.
        deltas: Already-authorized deltas, in command order.

    Returns:
        The resolved labels and whether they differ from the input as a set.
    """
    resolved = list(labels)
    touched = False

    for delta in deltas:
        name = delta.label.name
        position = next(
            (i for i, label in enumerate(resolved) if label.name == name), None
        )
        if delta.kind is DeltaKind.ADD:
            if position is None:
                resolved.append(Label(name=name))
                touched = True
        elif position is not None:
            del resolved[position]
            touched = True

    # "+X -X" touches the set but leaves it as it was
    changed = touched and {label.name for label in resolved} != {
        label.name for label in labels
    }
    return resolved, changed
