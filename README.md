# rbackit

Building blocks for role-based access control.

- `rbackit.rbac` defines the `RoleManager` interface and `DefaultRoleManager`. `DefaultRoleManager` is an in-memory graph of role inheritance, and it can scope that graph by domain.
- `rbackit.operators` holds the matching functions a policy matcher can use: key matching for RESTful paths, regular expressions, IP/CIDR matching, and a factory for the `g(...)` role function.
- `rbackit.util` holds small helpers for matcher expressions and lists of strings.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installing

```
pip install rbackit
```

## Role hierarchies

```python
from rbackit.rbac import DefaultRoleManager

rm = DefaultRoleManager(10)        # maximum depth of inheritance searched
rm.add_link("alice", "admin")      # alice inherits admin
rm.add_link("admin", "staff")

rm.has_link("alice", "staff")      # True
rm.get_roles("alice")              # ["admin"]  (direct roles only)
rm.get_users("admin")              # ["alice"]  (direct members only)
rm.delete_link("admin", "staff")
rm.clear()                         # forget everything
```

`has_link` is always `True` when both names are the same. It is `False` when either name is unknown, and also when the link lies deeper than the maximum depth.

### Domains

Pass one extra argument to scope a link or a query to a domain:

```python
rm.add_link("bob", "admin", "domain1")
rm.has_link("bob", "admin", "domain1")   # True
rm.has_link("bob", "admin", "domain2")   # False
rm.get_roles("bob", "domain1")           # ["admin"]
```

### Printing

`print_roles()` logs every role that inherits others, such as `alice < admin` or `u4 < (g2, g3)`. It uses the `rbackit.rbac` logger at INFO level and returns the same line.

### Errors

All errors are subclasses of `RoleManagerError`:

| Error | When it is raised |
| --- | --- |
| `DomainParameterError` | More than one domain is given. |
| `NamesNotFoundError` | `delete_link` is given a name that is not known. |
| `NameNotFoundError` | `get_users` is asked about a role that is not known. |

### Pattern roles

Stored role names can act as patterns when a matching function is set. The function is called as `fn(name, stored_name)`. Only one function is kept, so a later call replaces the earlier one.

```python
from rbackit.operators import key_match2

rm.add_matching_func("KeyMatch2", key_match2)
```

### Custom role managers

To write your own role manager, subclass `RoleManager` and implement `clear`, `add_link`, `delete_link`, `has_link`, `get_roles`, `get_users` and `print_roles`. The `Role` dataclass is the node type that `DefaultRoleManager` uses.

## Matching operators

```python
from rbackit.operators import key_match, key_match2, key_match3, regex_match, ip_match

key_match("/foo/bar", "/foo/*")                          # True
key_match2("/resource1", "/:resource")                   # True
key_match3("/myid/using/myresid", "/{id}/using/{resId}") # True
regex_match("/topic/edit/123", "/topic/edit/[0-9]+")     # True
ip_match("192.168.2.123", "192.168.2.0/24")              # True
```

- `regex_match` searches anywhere in the key. It raises `re.error` when the pattern is invalid.
- `ip_match` raises `ValueError` when either argument cannot be parsed.
- Each operator has a `*_func(*args)` variant, for example `key_match_func`. These variants take their first two arguments and raise `TypeError` when those arguments are missing or are not strings.

`generate_g_function(rm)` returns a callable `g(name1, name2[, domain])` that is backed by a role manager. When the role manager raises an error, the callable returns `False`. When the role manager is `None`, the callable compares the two names for equality.

## Helpers

`rbackit.util` provides these helpers:

- `escape_assertion`: rewrites `r.x` / `p.x` as `r_x` / `p_x`.
- `remove_comments`: strips a `#` comment.
- `array_equals`: ordered comparison of two lists.
- `array_2d_equals`: ordered comparison of two lists of lists.
- `set_equals`: order-insensitive comparison.
- `array_remove_duplicates`: returns a new list without duplicates.
- `array_to_string`, `params_to_string`: join items with `", "`.
- `join_slice`: builds a new list from one item followed by the rest.
- `set_subtract`: the items of one list that are not in another, in their original order.

## What this package does not do

There is no enforcer here. The package does not load model or policy files, does not evaluate matcher expressions, and does not store policies in files or databases. It provides only the pieces listed above, for use by code that does those jobs.