# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for compiled schema documents.

These checks catch schema mistakes that would otherwise only surface while
encoding or decoding a particular object: links to undeclared routes, route
bindings that cannot be satisfied, and properties that can never be written.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hydralink.catalog.loader import SchemaDocument
from hydralink.model.schema import ID_PROPERTY, PropertyDefinition, TypeDescriptor

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class CheckWarning:
    """A schema issue that does not prevent encoding or decoding.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class CheckError:
    """A schema issue that makes some encode or decode call fail.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class CheckResult:
    """Result of running all schema checks.

    Attributes:
        warnings: Non-fatal issues.
        errors: Issues that must be fixed.
    """

    warnings: list[CheckWarning] = field(default_factory=list)
    errors: list[CheckError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any errors were found."""
        return len(self.errors) > 0


def check_schema(document: SchemaDocument) -> CheckResult:
    """Run all consistency checks on *document*.

    Checks performed:

    1. **Unknown route** (error): a link property names a route that the
       schema does not declare.
    2. **Unknown binding** (error): a link binding names a variable that
       the route template does not contain.
    3. **Conflicting flags** (error): a property is both ``readonly`` and
       ``writeonly``.
    4. **Unlinked identifier** (error): an ``@id`` property has no link.
    5. **Ambiguous variables** (warning): a link has several required
       variables and no bindings, so its getter must return a mapping.
    6. **No setter** (warning): a writable plain property declares no
       setter and is skipped on decode.
    7. **Unbound type** (warning): a type has no ``class`` entry and must be
       bound in code.
    """
    result = CheckResult()
    for descriptor in document.types:
        if descriptor.class_path is None:
            result.warnings.append(
                CheckWarning(f"Type '{descriptor.name}' has no class and must be bound programmatically")
            )
        for prop in descriptor.properties:
            _check_property(document, descriptor, prop, result)
    return result


# ################
# Implementation
# ################


def _check_property(
    document: SchemaDocument,
    descriptor: TypeDescriptor,
    prop: PropertyDefinition,
    result: CheckResult,
) -> None:
    where = f"{descriptor.name}.{prop.name}"

    if prop.readonly and prop.writeonly:
        result.errors.append(CheckError(f"Property '{where}' cannot be both readonly and writeonly"))

    if prop.link is None:
        if prop.name == ID_PROPERTY:
            result.errors.append(CheckError(f"Property '{where}' must declare a link"))
        elif not prop.readonly and prop.setter is None:
            result.warnings.append(CheckWarning(f"Property '{where}' is writable but declares no setter"))
        return

    route = document.route(prop.link.route)
    if route is None:
        result.errors.append(CheckError(f"Property '{where}' links to unknown route '{prop.link.route}'"))
        return

    if prop.link.bindings is not None:
        for var in prop.link.bindings:
            if var not in route.variables:
                result.errors.append(
                    CheckError(f"Property '{where}' binds '{var}', which route '{route.name}' does not declare")
                )
    elif len(prop.link.variables) > 1:
        result.warnings.append(
            CheckWarning(
                f"Property '{where}' links to route '{route.name}' with variables "
                f"{', '.join(prop.link.variables)} but has no bindings; its getter must return a mapping"
            )
        )
