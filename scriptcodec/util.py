# Copyright (C) 2018-2019 The python-bitcointx developers
# Copyright (C) 2026 The python-scriptcodec developers
#
# This file is part of python-scriptcodec.
#
# It is subject to the license terms in the LICENSE file found in the top-level
# directory of this distribution.
#
# No part of python-scriptcodec, including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

import contextvars

from typing import Any, Callable, Dict, Union, Tuple


class _NoBoolCallable():
    __slots__ = ['method_name', 'method']

    def __init__(self, name: str, method: Callable[..., Any]) -> None:
        self.method_name = name
        self.method = method

    def __int__(self) -> int:
        raise TypeError(
            'Using this attribute as integer property is disabled. '
            'please use {}()'.format(self.method_name))

    def __bool__(self) -> bool:
        raise TypeError(
            'Using this attribute as boolean property is disabled. '
            'please use {}()'.format(self.method_name))

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.method(*args, **kwargs)


class no_bool_use_as_property():
    """A decorator that disables use of an attribute
    as a property in a boolean context

    `if script.is_p2pkh:` is always true and is almost certainly a bug,
    so the predicate has to be called: `if script.is_p2pkh():`"""

    def __init__(self, method: Callable[..., Any]) -> None:
        self.method = method

    def __get__(self, instance: Any, owner: type) -> _NoBoolCallable:
        method = self.method.__get__(instance, owner)

        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return method(*args, **kwargs)

        name = '{}{}.{}'.format(owner.__name__,
                                '' if instance is None else '()',
                                method.__name__)
        return _NoBoolCallable(name, wrapper)


def ensure_isinstance(var: object,
                      type_or_types: Union[type, Tuple[type, ...]],
                      var_description: str) -> None:
    if not isinstance(var, type_or_types):
        if isinstance(type_or_types, type):
            names_str = type_or_types.__name__
        else:
            names_str = ', '.join(tp.__name__ for tp in type_or_types)

        raise TypeError('{} is expected to be an instance of {}, '
                        'but an instance of {} was supplied'
                        .format(var_description, names_str,
                                var.__class__.__name__))


class ContextVarsCompat:
    """A container for context-local variables.

    Attributes supplied to the constructor become context variables:
    each thread, and each asyncio task, sees its own value, and starts
    out with the value given here."""

    _context_vars: Dict[str, 'contextvars.ContextVar[Any]']

    def __init__(self, **kwargs: Any) -> None:
        context_vars = {}
        for name, default in kwargs.items():
            context_vars[name] = contextvars.ContextVar(name, default=default)
        object.__setattr__(self, '_context_vars', context_vars)

    def __getattr__(self, name: str) -> Any:
        context_vars = object.__getattribute__(self, '_context_vars')
        if name not in context_vars:
            raise AttributeError(name)
        return context_vars[name].get()

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in self._context_vars:
            raise AttributeError(
                'context variable {} was not declared'.format(name))
        self._context_vars[name].set(value)


__all__ = (
    'no_bool_use_as_property',
    'ensure_isinstance',
    'ContextVarsCompat',
)
