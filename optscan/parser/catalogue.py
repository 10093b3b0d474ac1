# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionCatalogue`, the declarative set of options a parse
recognizes.

The catalogue maps every registered name (short and long) to its `Option`
(many-to-one), keeps the options in registration order for display, and records
the mutually exclusive `OptionGroup`s. It holds no parse state: the engine asks it
for a fresh `GroupRegistry` and the set of required keys at the start of every
parse, so one catalogue can serve any number of sequential parses.

Name lookup ignores leading dashes and then requires an exact match; there is no
abbreviation or prefix matching.

Example Usage:
    catalogue = OptionCatalogue()
    catalogue.add("v", "verbose", description="Print more")
    catalogue.register(Option("o", "output", arity=1, required=True))
    catalogue.add_group(OptionGroup([Option("a"), Option("b")], required=True))
"""
from __future__ import annotations

from typing import Iterator

from optscan.exceptions import DuplicateNameError, IllegalOptionError
from optscan.logger import logger
from optscan.parser.option import NO_ARGS, Option
from optscan.parser.option_group import GroupRegistry, OptionGroup
from optscan.parser.utils import strip_leading_hyphens


class OptionCatalogue:
    """
    Registry of recognized options and exclusive option groups.

    Registering a name that is already taken by a different option raises
    `DuplicateNameError` immediately.
    """

    def __init__(self) -> None:
        self._options: list[Option] = []
        self._name_map: dict[str, Option] = {}
        self._groups: dict[str, OptionGroup] = {}
        self._group_list: list[OptionGroup] = []

    def register(self, option: Option) -> OptionCatalogue:
        """
        Add `option` under each of its names.

        Registering the very same instance again is a no-op.

        Raises:
            DuplicateNameError: If a name is already used by another option.
        """
        if not isinstance(option, Option):
            raise IllegalOptionError(f"Expected an Option, got {type(option).__name__}")
        if any(existing is option for existing in self._options):
            return self
        for name in option.names:
            if name in self._name_map:
                raise DuplicateNameError(name)
        for name in option.names:
            self._name_map[name] = option
        self._options.append(option)
        logger.debug("Registered option %s", option)
        return self

    def add(
        self,
        short_name: str = "",
        long_name: str = "",
        has_arg: bool = False,
        description: str = "",
    ) -> OptionCatalogue:
        """Shorthand for registering a flag or single-value option."""
        return self.register(
            Option(
                short_name=short_name,
                long_name=long_name,
                description=description,
                arity=1 if has_arg else NO_ARGS,
            )
        )

    def add_group(self, group: OptionGroup) -> OptionCatalogue:
        """
        Register `group` and each of its member options.

        Every member is checked before anything is registered, so a failed call
        leaves the catalogue and the member options untouched.

        Raises:
            IllegalOptionError: If a member already belongs to another group.
            DuplicateNameError: If a member's name is taken by another option.
        """
        claimed: dict[str, Option] = {}
        for option in group.options:
            existing = self._groups.get(option.key)
            if existing is not None and existing is not group:
                raise IllegalOptionError(
                    f"Option '{option.key}' already belongs to group {existing}"
                )
            for name in option.names:
                owner = claimed.get(name, self._name_map.get(name))
                if owner is not None and owner is not option:
                    raise DuplicateNameError(name)
                claimed[name] = option
        for option in group.options:
            option.required = False
            self.register(option)
            self._groups[option.key] = group
        if group not in self._group_list:
            self._group_list.append(group)
        return self

    def lookup(self, token: str) -> Option | None:
        """Return the option named by `token` (dashes optional), if any."""
        return self._name_map.get(strip_leading_hyphens(token))

    def has_option(self, token: str) -> bool:
        return self.lookup(token) is not None

    def group_of(self, option: Option) -> OptionGroup | None:
        return self._groups.get(option.key)

    def finalize_for_parse(self) -> list[str | OptionGroup]:
        """
        Validate the catalogue and return the requirements of a parse.

        Returns:
            list[str | OptionGroup]: Keys of required options that are not group
            members, followed by every required group.

        Raises:
            DuplicateNameError: If two distinct options answer to the same name.
        """
        seen: dict[str, Option] = {}
        for option in self._options:
            for name in option.names:
                if name in seen and seen[name] is not option:
                    raise DuplicateNameError(name)
                seen[name] = option
        required: list[str | OptionGroup] = [
            option.key
            for option in self._options
            if option.required and option.key not in self._groups
        ]
        required.extend(group for group in self._group_list if group.required)
        return required

    def new_group_registry(self) -> GroupRegistry:
        """Return an empty selection tracker for one parse."""
        return GroupRegistry(dict(self._groups))

    @property
    def options(self) -> list[Option]:
        return list(self._options)

    @property
    def groups(self) -> list[OptionGroup]:
        return list(self._group_list)

    @property
    def required_keys(self) -> list[str | OptionGroup]:
        return self.finalize_for_parse()

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.has_option(token)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        required = sum(option.required for option in self._options)
        return (
            f"OptionCatalogue(options={len(self._options)}, "
            f"names={len(self._name_map)}, groups={len(self._group_list)}, "
            f"required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
