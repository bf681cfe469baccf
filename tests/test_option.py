"""Tests for the Option container (eager construction and operations)."""

import copy

import pytest
from adhoc import ArgumentNullError, Nothing, Option, ValueIsNullError, optional, some, unit
from adhoc.option import Absent, Present
from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import integers, options, values


def _boom(*_args):
    raise AssertionError('handler must not be invoked')


class TestSomeCreation:
    """Tests for some() and Option.some()."""

    def test_some_creation(self):
        """some() wraps a value."""
        assert some(42).is_some() is True
        assert some(42).to_list() == [42]

    def test_some_rejects_none(self):
        """some(None) is a null-payload violation, never Some(None)."""
        with pytest.raises(ValueIsNullError):
            some(None)

    def test_classmethod_some_rejects_none(self):
        """Option.some(None) fails the same way."""
        with pytest.raises(ValueIsNullError):
            Option.some(None)

    def test_some_accepts_falsy_values(self):
        """Falsy values other than None are legitimate payloads."""
        for value in (0, '', False, [], 0.0):
            assert some(value).is_some()

    def test_value_is_null_is_a_value_error(self):
        """ValueIsNullError can be caught as ValueError."""
        with pytest.raises(ValueError, match='Value is None'):
            some(None)

    @given(values)
    def test_some_round_trip(self, x):
        """Matching a present Option yields the payload unchanged."""
        assert some(x).match(lambda v: v, lambda: _boom()) == x

    def test_constructor_rejects_present_none(self):
        """Option(Present(None)) cannot build a present Option without a value."""
        with pytest.raises(ValueIsNullError):
            Option(Present(None))

    def test_constructor_accepts_cases(self):
        """The constructor takes an evaluated case and nothing else."""
        assert Option(Present(0)) == some(0)
        assert Option(Absent()) == Nothing
        with pytest.raises(TypeError):
            Option(5)

    def test_option_is_frozen(self):
        """Option instances are immutable."""
        opt = some(42)
        with pytest.raises(AttributeError):
            opt._case = None  # type: ignore[misc]
        with pytest.raises(AttributeError):
            del opt._case


class TestOptionalCreation:
    """Tests for optional() and Nothing."""

    def test_optional_value(self):
        """optional(x) is present for a non-None x."""
        assert optional(5) == some(5)

    def test_optional_none(self):
        """optional(None) is absent and never raises."""
        assert optional(None) is Nothing
        assert optional(None).is_none() is True

    def test_option_none_is_nothing(self):
        """Option.none() returns the Nothing singleton."""
        assert Option.none() is Nothing

    @given(st.one_of(st.none(), integers))
    def test_optional_never_fails(self, x):
        """optional() accepts any input."""
        assert optional(x).is_some() is (x is not None)


class TestOptionEquality:
    """Tests for equality, hashing and repr."""

    def test_some_equality(self):
        """Present options with equal values are equal."""
        assert some(42) == some(42)
        assert some(42) != some(43)

    def test_nothing_equality(self):
        """Absent options are equal to each other, never to a present one."""
        assert Nothing == optional(None)
        assert some(0) != Nothing

    def test_not_equal_to_other_types(self):
        """Options do not compare equal to raw values."""
        assert some(42) != 42

    def test_hashable(self):
        """Options are usable as dict keys."""
        assert {some(1): 'a'}[some(1)] == 'a'
        assert hash(Nothing) == hash(optional(None))

    def test_repr(self):
        """repr shows the state."""
        assert repr(some(42)) == 'Some(42)'
        assert repr(some('x')) == "Some('x')"
        assert repr(Nothing) == 'Nothing'

    def test_copy_returns_same_instance(self):
        """Copying an immutable Option returns it unchanged."""
        opt = some([1, 2])
        assert copy.copy(opt) is opt
        assert copy.deepcopy(opt) is opt


class TestOptionMatch:
    """Tests for match, match_unsafe and match_action."""

    def test_match_some(self):
        """match runs the present handler."""
        assert some(2).match(lambda v: v * 10, lambda: -1) == 20

    def test_match_none(self):
        """match runs the absent handler."""
        assert Nothing.match(lambda v: v, lambda: -1) == -1

    def test_match_rejects_none_result(self):
        """The safe match rejects a None result from the handler that ran."""
        with pytest.raises(ValueIsNullError):
            some(1).match(lambda _: None, lambda: 0)
        with pytest.raises(ValueIsNullError):
            Nothing.match(lambda v: v, lambda: None)

    def test_match_rejects_null_handler(self):
        """A None handler is a null-argument violation."""
        with pytest.raises(ArgumentNullError) as exc_info:
            some(1).match(lambda v: v, None)
        assert exc_info.value.name == 'none'

    def test_match_unsafe_allows_none_result(self):
        """match_unsafe returns a None result as-is."""
        assert some(1).match_unsafe(lambda _: None, lambda: 0) is None
        assert Nothing.match_unsafe(lambda v: v, lambda: None) is None

    def test_match_action(self):
        """match_action runs exactly one handler and returns unit."""
        seen = []
        assert some(3).match_action(seen.append, _boom) is unit
        assert Nothing.match_action(_boom, lambda: seen.append('none')) is unit
        assert seen == [3, 'none']


class TestIfSomeIfNone:
    """Tests for if_some and if_none."""

    def test_if_some_on_some(self):
        """if_some runs the action with the value."""
        seen = []
        assert some(1).if_some(seen.append) is unit
        assert seen == [1]

    def test_if_some_on_nothing(self):
        """if_some is a no-op when absent."""
        assert Nothing.if_some(_boom) is unit

    def test_if_none_on_nothing(self):
        """if_none runs the action when absent."""
        seen = []
        assert Nothing.if_none(lambda: seen.append('x')) is unit
        assert seen == ['x']

    def test_if_none_on_some(self):
        """if_none is a no-op when present."""
        assert some(1).if_none(_boom) is unit


class TestGetOrElse:
    """Tests for get_or_else and get_or_else_unsafe."""

    def test_present_value_wins(self):
        """The contained value is returned and the fallback ignored."""
        assert some(1).get_or_else(_boom) == 1
        assert some(1).get_or_else(2) == 1

    def test_fallback_value_and_callable(self):
        """Plain and callable fallbacks are both supported."""
        assert Nothing.get_or_else(2) == 2
        assert Nothing.get_or_else(lambda: 3) == 3

    def test_safe_fallback_rejects_none(self):
        """A None fallback is rejected by the safe policy."""
        with pytest.raises(ValueIsNullError):
            Nothing.get_or_else(None)
        with pytest.raises(ValueIsNullError):
            Nothing.get_or_else(lambda: None)

    def test_unsafe_fallback_allows_none(self):
        """A None fallback is returned by the unsafe policy."""
        assert Nothing.get_or_else_unsafe(None) is None
        assert Nothing.get_or_else_unsafe(lambda: None) is None


class TestOptionMap:
    """Tests for map, bimap and parmap."""

    def test_map_some(self):
        """map transforms the value."""
        assert some(2).map(lambda x: x * 2) == some(4)

    def test_map_nothing_never_invokes(self):
        """map over absent yields absent without calling the transform."""
        assert Nothing.map(_boom) is Nothing

    def test_map_to_none_is_violation(self):
        """A transform returning None is rejected by the method (safe policy)."""
        with pytest.raises(ValueIsNullError):
            some(1).map(lambda _: None)

    def test_map_null_function(self):
        """A None transform is rejected even when absent."""
        with pytest.raises(ArgumentNullError):
            Nothing.map(None)

    def test_bimap_some(self):
        """bimap on present runs only the present handler."""
        assert some(2).bimap(lambda x: x + 1, _boom) == some(3)

    def test_bimap_none(self):
        """bimap on absent runs only the absent handler, which may supply a value."""
        assert Nothing.bimap(_boom, lambda: 7) == some(7)

    @given(options)
    def test_bimap_invokes_exactly_one(self, opt):
        """Exactly one of the two handlers runs, matching the state."""
        calls = []
        opt.bimap(lambda x: calls.append('some') or 1, lambda: calls.append('none') or 0)
        assert calls == (['some'] if opt.is_some() else ['none'])

    def test_parmap(self):
        """parmap partially applies the value."""
        add = some(2).parmap(lambda a, b: a + b)
        assert add.match(lambda f: f(3), lambda: -1) == 5
        assert Nothing.parmap(lambda a, b: a + b) is Nothing


class TestOptionFilterBind:
    """Tests for filter and bind."""

    def test_filter_keeps(self):
        """filter keeps a value that satisfies the predicate."""
        opt = some(10)
        assert opt.filter(lambda x: x > 5) is opt

    def test_filter_drops(self):
        """filter drops a value that fails the predicate."""
        assert some(1).filter(lambda x: x > 5) is Nothing

    def test_filter_nothing(self):
        """Absent stays absent and the predicate is not called."""
        assert Nothing.filter(_boom) is Nothing

    @given(options, st.integers())
    def test_filter_idempotent(self, opt, threshold):
        """Filtering twice with the same predicate equals filtering once."""
        pred = lambda x: hash(x) % 7 > threshold % 7  # noqa: E731
        assert opt.filter(pred).filter(pred) == opt.filter(pred)

    def test_bind_some(self):
        """bind flattens the returned Option."""
        assert some(4).bind(lambda x: some(x // 2)) == some(2)
        assert some(4).bind(lambda _: Nothing) is Nothing

    def test_bind_nothing(self):
        """bind on absent does not call the binder."""
        assert Nothing.bind(_boom) is Nothing

    def test_bind_requires_option(self):
        """A binder returning a raw value is a type error."""
        with pytest.raises(TypeError, match='must return an Option'):
            some(1).bind(lambda x: x)


class TestOptionFolds:
    """Tests for fold, bifold, forall, exists and count."""

    def test_fold(self):
        """fold runs the folder once when present, never when absent."""
        assert some(3).fold(10, lambda s, x: s + x) == 13
        assert Nothing.fold(10, _boom) == 10

    def test_bifold(self):
        """bifold uses the absent step when absent."""
        assert some(3).bifold(10, lambda s, x: s + x, _boom) == 13
        assert Nothing.bifold(10, _boom, lambda s: s * 2) == 20

    def test_forall_on_nothing_is_vacuous(self):
        """forall on absent is true without calling the predicate."""
        assert Nothing.forall(_boom) is True

    def test_exists_on_nothing_is_false(self):
        """exists on absent is false without calling the predicate."""
        assert Nothing.exists(_boom) is False

    def test_forall_exists_on_some(self):
        """On present options both quantifiers test the value."""
        assert some(4).forall(lambda x: x > 3) is True
        assert some(4).forall(lambda x: x > 5) is False
        assert some(4).exists(lambda x: x > 3) is True
        assert some(4).exists(lambda x: x > 5) is False

    def test_bi_quantifiers(self):
        """The bi variants consult the absent-case predicate."""
        assert Nothing.biforall(_boom, lambda: False) is False
        assert Nothing.biexists(_boom, lambda: True) is True
        assert some(1).biforall(lambda x: x == 1, _boom) is True
        assert some(1).biexists(lambda x: x == 2, _boom) is False

    @given(options)
    def test_count(self, opt):
        """count is 0 for absent and 1 for present."""
        assert opt.count() == (1 if opt.is_some() else 0)


class TestOptionConversion:
    """Tests for to_list, to_array and iteration."""

    def test_to_list(self):
        """to_list gives zero or one items."""
        assert some(1).to_list() == [1]
        assert Nothing.to_list() == []

    def test_to_array(self):
        """to_array gives a tuple of zero or one items."""
        assert some(1).to_array() == (1,)
        assert Nothing.to_array() == ()

    def test_iteration(self):
        """Options iterate like zero-or-one element sequences."""
        assert [x for x in some('a')] == ['a']
        assert list(Nothing) == []


class TestEndToEnd:
    """End-to-end scenarios."""

    def test_map_filter_match(self):
        """optional(5).map(x*2).filter(x>5).match(v, -1) is 10."""
        result = optional(5).map(lambda x: x * 2).filter(lambda x: x > 5).match(lambda v: v, lambda: -1)
        assert result == 10

    def test_optional_null_match(self):
        """optional(None).match(v, -1) is -1."""
        assert optional(None).match(lambda v: v, lambda: -1) == -1


class TestOptionFunctorLaws:
    """Property-based tests for functor laws."""

    @given(options)
    def test_identity(self, opt):
        """map(id) == id."""
        assert opt.map(lambda x: x) == opt

    @given(options)
    def test_composition(self, opt):
        """map(f).map(g) == map(g . f)."""
        f = lambda x: (x, 1)  # noqa: E731
        g = lambda t: repr(t)  # noqa: E731
        assert opt.map(f).map(g) == opt.map(lambda x: g(f(x)))


class TestOptionMonadLaws:
    """Property-based tests for monad laws."""

    @given(values)
    def test_left_identity(self, x):
        """some(x).bind(f) == f(x)."""
        f = lambda v: some((v, v))  # noqa: E731
        assert some(x).bind(f) == f(x)

    @given(options)
    def test_right_identity(self, opt):
        """opt.bind(some) == opt."""
        assert opt.bind(some) == opt
