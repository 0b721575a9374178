"""Tests for the Result type (Success and Failure)."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from proptype import (
    Failure,
    InvalidObjectError,
    Success,
    UnwrapError,
    UnwrapFailureError,
    collect,
    safe,
)
from tests.strategies import exceptions, integers, json_values, texts


def increment(value: int) -> Success[int]:
    return Success(value + 1)


def reject(value: int) -> Failure[str]:
    return Failure(f'rejected {value}')


def recover(error: str) -> Success[str]:
    return Success(f'recovered from {error}')


class TestSuccessCreation:
    """Tests for Success instantiation and basic properties."""

    def test_success_creation(self):
        """Success wraps a value."""
        assert Success(42).value == 42

    def test_success_with_none(self):
        """Success can wrap None."""
        assert Success(None).value is None

    def test_success_is_frozen(self, sample_success):
        """Success instances are immutable."""
        with pytest.raises(AttributeError):
            sample_success.value = 100  # type: ignore[misc]

    def test_success_freezes_payload(self):
        """The payload is copied and made read-only on construction."""
        data = {'tags': ['a', 'b']}
        success = Success(data)
        data['tags'].append('c')

        assert success.value['tags'] == ('a', 'b')
        with pytest.raises(TypeError):
            success.value['tags'] = ()  # type: ignore[index]

    def test_predicates(self, sample_success):
        """Success reports itself as a success."""
        assert sample_success.is_success()
        assert not sample_success.is_failure()


class TestFailureCreation:
    """Tests for Failure instantiation and basic properties."""

    def test_failure_creation(self):
        """Failure wraps an error value."""
        assert Failure('boom').error == 'boom'

    def test_failure_with_exception(self):
        """Exceptions are handed over as-is rather than copied."""
        exc = ValueError('something went wrong')
        assert Failure(exc).error is exc

    def test_failure_is_frozen(self, sample_failure):
        """Failure instances are immutable."""
        with pytest.raises(AttributeError):
            sample_failure.error = 'other'  # type: ignore[misc]

    def test_predicates(self, sample_failure):
        """Failure reports itself as a failure."""
        assert sample_failure.is_failure()
        assert not sample_failure.is_success()


class TestCombinators:
    """Tests for and_then, or_else, map and map_failure."""

    def test_and_then_on_success(self):
        """and_then applies the function to the value."""
        assert Success(1).and_then(increment) == Success(2)

    def test_and_then_can_fail(self):
        """A later step may turn a Success into a Failure."""
        assert Success(1).and_then(reject) == Failure('rejected 1')

    def test_and_then_on_failure(self, sample_failure):
        """and_then does not call the function on a Failure."""
        assert sample_failure.and_then(increment) is sample_failure

    def test_or_else_on_success(self, sample_success):
        """or_else leaves a Success alone."""
        assert sample_success.or_else(recover) is sample_success

    def test_or_else_on_failure(self):
        """or_else applies the recovery to the error."""
        assert Failure('boom').or_else(recover) == Success('recovered from boom')

    def test_map(self):
        """map transforms the value and keeps the variant."""
        assert Success(5).map(lambda x: x * 2) == Success(10)
        assert Failure('boom').map(lambda x: x * 2) == Failure('boom')

    def test_map_failure(self):
        """map_failure transforms the error and keeps the variant."""
        assert Failure('boom').map_failure(str.upper) == Failure('BOOM')
        assert Success(5).map_failure(str.upper) == Success(5)


class TestCombinatorLaws:
    """Property-based checks of the Result combinator laws."""

    @given(integers)
    def test_success_and_then(self, value):
        """Success(v).and_then(f) == f(v)."""
        assert Success(value).and_then(increment) == increment(value)

    @given(texts)
    def test_failure_and_then(self, error):
        """Failure(e).and_then(f) == Failure(e)."""
        assert Failure(error).and_then(increment) == Failure(error)

    @given(integers)
    def test_success_or_else(self, value):
        """Success(v).or_else(f) == Success(v)."""
        assert Success(value).or_else(recover) == Success(value)

    @given(texts)
    def test_failure_or_else(self, error):
        """Failure(e).or_else(f) == f(e)."""
        assert Failure(error).or_else(recover) == recover(error)

    @given(json_values)
    def test_map_identity(self, value):
        """Mapping the identity function changes nothing."""
        assert Success(value).map(lambda x: x) == Success(value)


class TestUnwrap:
    """Tests for unwrap, unwrap_or and unwrap_failure."""

    def test_unwrap_success(self, sample_success):
        """unwrap returns the value of a Success."""
        assert sample_success.unwrap() == 42

    def test_unwrap_failure_message(self):
        """A message error is raised as UnwrapError carrying the message."""
        with pytest.raises(UnwrapError, match='must be within 1..10, but was: 11') as info:
            Failure('must be within 1..10, but was: 11').unwrap()
        assert info.value.error == 'must be within 1..10, but was: 11'

    @given(exceptions)
    def test_unwrap_failure_exception(self, exc):
        """An exception error is raised as itself."""
        with pytest.raises(type(exc)) as info:
            Failure(exc).unwrap()
        assert info.value is exc

    def test_unwrap_failure_invalid_object(self):
        """InvalidObjectError payloads are raised unchanged."""
        error = InvalidObjectError('Person', {}, {'name': ['is required']})
        with pytest.raises(InvalidObjectError) as info:
            Failure(error).unwrap()
        assert info.value['name'] == ('is required',)

    def test_unwrap_or(self, sample_success, sample_failure):
        """unwrap_or returns the value, or the default on a Failure."""
        assert sample_success.unwrap_or(0) == 42
        assert sample_failure.unwrap_or(0) == 0

    def test_unwrap_failure_returns_error(self, sample_failure):
        """unwrap_failure returns the error of a Failure."""
        assert sample_failure.unwrap_failure() == 'must be positive, but was: -1'

    def test_unwrap_failure_on_success(self, sample_success):
        """unwrap_failure on a Success raises with a fixed message."""
        with pytest.raises(UnwrapFailureError, match='Cannot unwrap failure from success'):
            sample_success.unwrap_failure()


class TestResultEquality:
    """Tests for Result equality and hashing."""

    def test_success_equality(self):
        """Successes with equal values are equal and hash alike."""
        assert Success(42) == Success(42)
        assert hash(Success(42)) == hash(Success(42))
        assert Success(42).eql(Success(42))

    def test_success_inequality(self):
        """Successes with different values are not equal."""
        assert Success(42) != Success(43)

    def test_failure_equality(self):
        """Failures with equal errors are equal."""
        assert Failure('boom') == Failure('boom')
        assert Failure('boom') != Failure('bang')

    def test_variants_differ(self):
        """A Success never equals a Failure with the same payload."""
        assert Success('x') != Failure('x')
        assert not Success('x').eql(Failure('x'))

    def test_frozen_payloads_hash(self):
        """Mapping and list payloads are hashable once frozen."""
        assert hash(Success({'a': [1, 2]})) == hash(Success({'a': [1, 2]}))

    def test_strict_equality(self):
        """eql refuses to coerce 1 and 1.0."""
        assert Success(1) == Success(1.0)
        assert not Success(1).eql(Success(1.0))


class TestPatternMatching:
    """Tests for match statements over Results."""

    def test_match_success(self):
        """Success deconstructs positionally."""
        match Success(3):
            case Success(value):
                assert value == 3
            case _:
                pytest.fail('expected a Success')

    def test_match_failure(self):
        """Failure deconstructs positionally."""
        match Failure('boom'):
            case Success(_):
                pytest.fail('expected a Failure')
            case Failure(error):
                assert error == 'boom'

    def test_repr(self):
        """repr shows the variant and the payload."""
        assert repr(Success(10)) == 'Success(10)'
        assert repr(Failure('boom')) == "Failure('boom')"


class TestCollect:
    """Tests for collect."""

    def test_collect_all_success(self):
        """Values are gathered into a tuple."""
        assert collect([Success(1), Success(2)]) == Success((1, 2))

    def test_collect_short_circuits(self):
        """The first Failure is returned."""
        assert collect([Success(1), Failure('boom'), Failure('bang')]) == Failure('boom')

    def test_collect_empty(self):
        """An empty iterable collects into an empty tuple."""
        assert collect([]) == Success(())

    @given(st.lists(integers, max_size=10))
    def test_collect_preserves_order(self, values):
        """Collected values keep their order."""
        assert collect(Success(v) for v in values).unwrap() == tuple(values)


class TestSafe:
    """Tests for the safe decorator."""

    def test_safe_returns_success(self):
        """A normal return becomes a Success."""

        @safe
        def double(x: int) -> int:
            return x * 2

        assert double(4) == Success(8)

    def test_safe_catches_exception(self):
        """A raised exception becomes a Failure holding it."""

        @safe
        def explode() -> None:
            raise ValueError('boom')

        result = explode()
        assert result.is_failure()
        assert isinstance(result.unwrap_failure(), ValueError)

    def test_safe_with_exception_filter(self):
        """Exceptions outside the filter propagate."""

        @safe(exceptions=(ValueError,))
        def explode() -> None:
            raise TypeError('boom')

        with pytest.raises(TypeError):
            explode()

    def test_safe_preserves_metadata(self):
        """The wrapped function keeps its name and docstring."""

        @safe
        def documented() -> int:
            """Return one."""
            return 1

        assert documented.__name__ == 'documented'
        assert documented.__doc__ == 'Return one.'

    def test_safe_on_method(self):
        """safe works on methods."""

        class Parser:
            @safe(exceptions=(ValueError,))
            def parse(self, text: str) -> int:
                return int(text)

        assert Parser().parse('12') == Success(12)
        assert Parser().parse('twelve').is_failure()
