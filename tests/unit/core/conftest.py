"""Shared fixtures for core unit tests"""

import pytest


POLICY_V1 = """\
Leave Policy
Employees accrue 20 days of annual leave.
Requests must be submitted two weeks in advance.
Unused leave expires at year end.
Contact HR for exceptions."""

POLICY_V2 = """\
Leave Policy
Employees accrue 25 days of annual leave.
Requests must be submitted two weeks in advance.
Up to 5 unused days carry over.
Contact HR for exceptions.
Approved by the People Committee."""


@pytest.fixture(name="policy_v1")
def policy_v1_fixture():
    return POLICY_V1


@pytest.fixture(name="policy_v2")
def policy_v2_fixture():
    return POLICY_V2


@pytest.fixture(name="ten_lines")
def ten_lines_fixture():
    """Lines 'line 1'..'line 10' joined with newlines."""
    return "\n".join(f"line {n}" for n in range(1, 11))
