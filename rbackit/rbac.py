"""Role managers: the role manager interface and its default in-memory implementation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

MatchingFunc = Callable[[str, str], bool]


class RoleManagerError(Exception):
    """Base class for role manager errors."""


class DomainParameterError(RoleManagerError, ValueError):
    """More than one domain was given."""

    def __init__(self) -> None:
        super().__init__("domain should be 1 parameter")


class NameNotFoundError(RoleManagerError, KeyError):
    """A role name is not known to the role manager."""

    def __init__(self, name: str = "") -> None:
        super().__init__(f"name does not exist: {name}" if name else "name does not exist")

    def __str__(self) -> str:
        return str(self.args[0])


class NamesNotFoundError(RoleManagerError, KeyError):
    """One of the two role names of a link is not known to the role manager."""

    def __init__(self, name1: str = "", name2: str = "") -> None:
        super().__init__(f"name1 or name2 does not exist: {name1}, {name2}")

    def __str__(self) -> str:
        return str(self.args[0])


class RoleManager(ABC):
    """Operations for managing role inheritance.

    The optional trailing argument of the link and query methods is a domain,
    used as a prefix for role names.
    """

    @abstractmethod
    def clear(self) -> None:
        """Remove all stored data and reset to the initial state."""

    @abstractmethod
    def add_link(self, name1: str, name2: str, *args: str) -> None:
        """Make role ``name1`` inherit role ``name2``."""

    @abstractmethod
    def delete_link(self, name1: str, name2: str, *args: str) -> None:
        """Remove the inheritance of ``name2`` by ``name1``."""

    @abstractmethod
    def has_link(self, name1: str, name2: str, *args: str) -> bool:
        """Return whether role ``name1`` inherits role ``name2``."""

    @abstractmethod
    def get_roles(self, name: str, *args: str) -> list[str]:
        """Return the roles that ``name`` directly inherits."""

    @abstractmethod
    def get_users(self, name: str, *args: str) -> list[str]:
        """Return the names that directly inherit role ``name``."""

    @abstractmethod
    def print_roles(self) -> str:
        """Log all roles and return the logged text."""


@dataclass(eq=False)
class Role:
    """A named role and the roles it directly inherits."""

    name: str
    roles: list[Role] = field(default_factory=list)

    def add_role(self, role: Role) -> None:
        """Inherit ``role`` unless a role of that name is already inherited."""
        if not self.has_direct_role(role.name):
            self.roles.append(role)

    def delete_role(self, role: Role) -> None:
        """Stop inheriting the role named like ``role``."""
        for i, existing in enumerate(self.roles):
            if existing.name == role.name:
                del self.roles[i]
                return

    def has_role(self, name: str, hierarchy_level: int) -> bool:
        """Return whether this role is or inherits ``name`` within the given depth."""
        if self.name == name:
            return True
        if hierarchy_level <= 0:
            return False
        return any(role.has_role(name, hierarchy_level - 1) for role in self.roles)

    def has_direct_role(self, name: str) -> bool:
        """Return whether ``name`` is directly inherited."""
        return any(role.name == name for role in self.roles)

    def get_roles(self) -> list[str]:
        """Return the names of the directly inherited roles."""
        return [role.name for role in self.roles]

    def __str__(self) -> str:
        if not self.roles:
            return ""
        names = ", ".join(self.get_roles())
        if len(self.roles) == 1:
            return f"{self.name} < {names}"
        return f"{self.name} < ({names})"


def _domain_of(args: tuple[str, ...]) -> str | None:
    if len(args) > 1:
        raise DomainParameterError()
    return args[0] if args else None


def _qualify(name: str, domain: str | None) -> str:
    return name if domain is None else f"{domain}::{name}"


def _unqualify(names: list[str], domain: str | None) -> list[str]:
    if domain is None:
        return names
    cut = len(domain) + 2
    return [n[cut:] for n in names]


class DefaultRoleManager(RoleManager):
    """In-memory role manager with a limit on inheritance depth."""

    def __init__(self, max_hierarchy_level: int) -> None:
        self.max_hierarchy_level = max_hierarchy_level
        self._all_roles: dict[str, Role] = {}
        self._matching_func: MatchingFunc | None = None

    def add_matching_func(self, name: str, fn: MatchingFunc) -> None:
        """Use ``fn(name, pattern)`` to match role names against stored ones.

        Only one function is kept; a later call replaces an earlier one.
        """
        self._matching_func = fn

    def _has_role(self, name: str) -> bool:
        if self._matching_func is not None:
            return any(self._matching_func(name, key) for key in list(self._all_roles))
        return name in self._all_roles

    def _create_role(self, name: str) -> Role:
        if self._matching_func is not None:
            for key in list(self._all_roles):
                if self._matching_func(name, key):
                    name = key
        return self._all_roles.setdefault(name, Role(name))

    def clear(self) -> None:
        self._all_roles = {}

    def add_link(self, name1: str, name2: str, *args: str) -> None:
        domain = _domain_of(args)
        role1 = self._create_role(_qualify(name1, domain))
        role2 = self._create_role(_qualify(name2, domain))
        role1.add_role(role2)

    def delete_link(self, name1: str, name2: str, *args: str) -> None:
        domain = _domain_of(args)
        name1, name2 = _qualify(name1, domain), _qualify(name2, domain)
        if not self._has_role(name1) or not self._has_role(name2):
            raise NamesNotFoundError(name1, name2)
        self._create_role(name1).delete_role(self._create_role(name2))

    def has_link(self, name1: str, name2: str, *args: str) -> bool:
        domain = _domain_of(args)
        name1, name2 = _qualify(name1, domain), _qualify(name2, domain)
        if name1 == name2:
            return True
        if not self._has_role(name1) or not self._has_role(name2):
            return False
        return self._create_role(name1).has_role(name2, self.max_hierarchy_level)

    def get_roles(self, name: str, *args: str) -> list[str]:
        domain = _domain_of(args)
        name = _qualify(name, domain)
        if not self._has_role(name):
            return []
        return _unqualify(self._create_role(name).get_roles(), domain)

    def get_users(self, name: str, *args: str) -> list[str]:
        domain = _domain_of(args)
        name = _qualify(name, domain)
        if not self._has_role(name):
            raise NameNotFoundError(name)
        users = [role.name for role in self._all_roles.values() if role.has_direct_role(name)]
        return _unqualify(users, domain)

    def print_roles(self) -> str:
        line = ", ".join(text for role in self._all_roles.values() if (text := str(role)))
        logger.info(line)
        return line