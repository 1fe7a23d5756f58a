# -*- test-case-name: rejoinder.test.test_attrs_zope -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Validation of L{zope.interface} providers on L{attrs} classes.
"""

from __future__ import annotations

import attrs
from zope.interface import Interface


__all__ = ()


@attrs.frozen(repr=False)
class _ProvidesValidator:
    interface: type[Interface]

    def __call__(
        self, inst: object, attribute: attrs.Attribute, value: object
    ) -> None:
        if self.interface.providedBy(value):
            return

        raise TypeError(
            f"{attribute.name!r} must provide {self.interface.__name__}, "
            f"but {value!r} does not",
            attribute,
            self.interface,
            value,
        )

    def __repr__(self) -> str:
        return f"<provides validator for {self.interface.__name__}>"


def provides(interface: type[Interface]) -> _ProvidesValidator:
    """
    Validator that raises L{TypeError} unless the value provides
    C{interface}.

    Stands in for the deprecated C{attr.validators.provides}.

    @param interface: The interface values must provide.
    """
    return _ProvidesValidator(interface)
