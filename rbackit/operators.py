"""Built-in matcher operators: key, regex and IP matching, and the ``g`` function factory."""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Callable
from typing import Any

from rbackit.rbac import RoleManager, RoleManagerError

_IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

_COLON_PARAM = re.compile(r"(.*):[^/]+(.*)")
_BRACE_PARAM = re.compile(r"(.*)\{[^/]+\}(.*)")


def _two_strings(args: tuple[Any, ...]) -> tuple[str, str]:
    if len(args) < 2:
        raise TypeError(f"expected 2 string arguments, got {len(args)}")
    first, second = args[0], args[1]
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("arguments must be strings")
    return first, second


def key_match(key1: str, key2: str) -> bool:
    """Return whether ``key1`` matches ``key2``, where a ``*`` in ``key2`` matches any suffix.

    For example, ``/foo/bar`` matches ``/foo/*``.
    """
    i = key2.find("*")
    if i == -1:
        return key1 == key2
    if len(key1) > i:
        return key1[:i] == key2[:i]
    return key1 == key2[:i]


def key_match_func(*args: Any) -> bool:
    """Call :func:`key_match` on the first two arguments."""
    return key_match(*_two_strings(args))


def _expand_params(key2: str, marker: str, pattern: re.Pattern[str]) -> str:
    key2 = key2.replace("/*", "/.*")
    while marker in key2:
        key2 = pattern.sub(r"\1[^/]+\2", key2)
    return key2


def key_match2(key1: str, key2: str) -> bool:
    """Return whether ``key1`` matches the RESTful pattern ``key2``.

    ``key2`` may hold ``*`` after a slash and ``:name`` path parameters,
    so ``/resource1`` matches ``/:resource``.
    """
    return regex_match(key1, "^" + _expand_params(key2, "/:", _COLON_PARAM) + "$")


def key_match2_func(*args: Any) -> bool:
    """Call :func:`key_match2` on the first two arguments."""
    return key_match2(*_two_strings(args))


def key_match3(key1: str, key2: str) -> bool:
    """Return whether ``key1`` matches the RESTful pattern ``key2``.

    ``key2`` may hold ``*`` after a slash and ``{name}`` path parameters,
    so ``/resource1`` matches ``/{resource}``.
    """
    return regex_match(key1, "^" + _expand_params(key2, "/{", _BRACE_PARAM) + "$")


def key_match3_func(*args: Any) -> bool:
    """Call :func:`key_match3` on the first two arguments."""
    return key_match3(*_two_strings(args))


def regex_match(key1: str, key2: str) -> bool:
    """Return whether the regular expression ``key2`` matches anywhere in ``key1``.

    Raises :class:`re.error` if ``key2`` is not a valid expression.
    """
    return re.search(key2, key1) is not None


def regex_match_func(*args: Any) -> bool:
    """Call :func:`regex_match` on the first two arguments."""
    return regex_match(*_two_strings(args))


def _normalize(ip: _IPAddress) -> _IPAddress:
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        return ip.ipv4_mapped
    return ip


def _parse_ip(text: str) -> _IPAddress | None:
    if "%" in text:
        return None
    try:
        return _normalize(ipaddress.ip_address(text))
    except ValueError:
        return None


def _parse_cidr(text: str) -> ipaddress.IPv4Network | ipaddress.IPv6Network | None:
    if "/" not in text or "%" in text:
        return None
    try:
        return ipaddress.ip_network(text, strict=False)
    except ValueError:
        return None


def ip_match(ip1: str, ip2: str) -> bool:
    """Return whether address ``ip1`` equals address ``ip2`` or lies in CIDR block ``ip2``.

    For example, ``192.168.2.123`` matches ``192.168.2.0/24``.
    Raises :class:`ValueError` if either argument cannot be parsed.
    """
    address = _parse_ip(ip1)
    if address is None:
        raise ValueError("invalid argument: ip1 in ip_match() function is not an IP address.")

    network = _parse_cidr(ip2)
    if network is None:
        other = _parse_ip(ip2)
        if other is None:
            raise ValueError(
                "invalid argument: ip2 in ip_match() function is neither an IP address nor a CIDR."
            )
        return address == other

    return address in network


def ip_match_func(*args: Any) -> bool:
    """Call :func:`ip_match` on the first two arguments."""
    return ip_match(*_two_strings(args))


def generate_g_function(rm: RoleManager | None) -> Callable[..., bool]:
    """Build the ``g(name1, name2[, domain])`` matcher function over a role manager.

    Without a role manager the function compares the two names for equality.
    Errors from the role manager count as no link.
    """

    def g(*args: Any) -> bool:
        name1, name2 = _two_strings(args)
        if rm is None:
            return name1 == name2
        try:
            if len(args) == 2:
                return rm.has_link(name1, name2)
            domain = args[2]
            if not isinstance(domain, str):
                raise TypeError("domain must be a string")
            return rm.has_link(name1, name2, domain)
        except RoleManagerError:
            return False

    return g