# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Mutually exclusive option groups.

`OptionGroup` is plain catalogue data: its member options and whether one of them
must be supplied. Which member was chosen is session state, tracked by a
`GroupRegistry` that the engine creates fresh for every parse so a catalogue can
be reused across parses without resetting anything.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from optscan.exceptions import AlreadySelectedError, IllegalOptionError
from optscan.logger import logger
from optscan.parser.option import Option


@dataclass(eq=False)
class OptionGroup:
    """
    A set of options of which at most one may be supplied per parse.

    Attributes:
        options (list[Option]): Member options, in declaration order.
        required (bool): True if exactly one member must be supplied.
    """

    options: list[Option] = field(default_factory=list)
    required: bool = False

    def add_option(self, option: Option) -> OptionGroup:
        """Add `option` to the group. Members are never individually required."""
        if option in self.options:
            raise IllegalOptionError(
                f"Option '{option.key}' is already a member of this group"
            )
        option.required = False
        self.options.append(option)
        return self

    @property
    def keys(self) -> list[str]:
        return [option.key for option in self.options]

    def __contains__(self, option: object) -> bool:
        return option in self.options

    def __str__(self) -> str:
        members = []
        for option in self.options:
            if option.short_name:
                members.append(f"-{option.short_name}")
            else:
                members.append(f"--{option.long_name}")
        return f"[{' | '.join(members)}]"


class GroupRegistry:
    """Tracks the selected member of each group during a single parse."""

    def __init__(self, groups: dict[str, OptionGroup]) -> None:
        self._groups: dict[str, OptionGroup] = groups
        self._selected: dict[OptionGroup, str] = {}

    def group_of(self, option: Option) -> OptionGroup | None:
        """Return the group `option` belongs to, if any."""
        return self._groups.get(option.key)

    def selected(self, group: OptionGroup) -> str | None:
        """Return the key of the member selected in `group`, if any."""
        return self._selected.get(group)

    def select(self, option: Option) -> OptionGroup | None:
        """
        Record `option` as the selected member of its group.

        Selecting the same option twice is a no-op.

        Raises:
            AlreadySelectedError: If another member was selected earlier in this parse.
        """
        group = self.group_of(option)
        if group is None:
            return None
        previous = self._selected.get(group)
        if previous is not None and previous != option.key:
            raise AlreadySelectedError(group, previous, option)
        self._selected[group] = option.key
        logger.debug("Selected '%s' in group %s", option.key, group)
        return group
