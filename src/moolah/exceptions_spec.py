from __future__ import annotations

import pytest

from moolah import exceptions
from moolah.exceptions import MoolahError

ALL_ERRORS = [getattr(exceptions, name) for name in exceptions.__all__ if name != "MoolahError"]


class DescribeMoolahErrors:
    @pytest.mark.parametrize("error_cls", ALL_ERRORS)
    def it_should_carry_its_fixed_message(self, error_cls):
        error = error_cls()
        assert isinstance(error, MoolahError)
        assert str(error) == error_cls.message

    def it_should_give_every_error_a_distinct_message(self):
        messages = [cls.message for cls in ALL_ERRORS]
        assert len(set(messages)) == len(messages)
