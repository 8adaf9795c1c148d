"""Repository protocols — concrete repositories implement every contract method."""

import inspect

import pytest

from chirp.core import repository_protocols as contracts
from chirp.repositories import AuthorRepository, CheepRepository


def _contract_methods(protocol) -> list[str]:
    return [
        name for name, member in vars(protocol).items()
        if inspect.iscoroutinefunction(member)
    ]


@pytest.mark.parametrize("protocol,implementation", [
    (contracts.AuthorRepository, AuthorRepository),
    (contracts.CheepRepository, CheepRepository),
])
def test_implementation_covers_protocol(protocol, implementation):
    methods = _contract_methods(protocol)
    assert methods
    for name in methods:
        impl = getattr(implementation, name, None)
        assert impl is not None, name
        assert inspect.iscoroutinefunction(impl), name
        assert (
            list(inspect.signature(impl).parameters)
            == list(inspect.signature(getattr(protocol, name)).parameters)
        ), name
