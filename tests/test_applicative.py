"""Tests for ap, lift_n, lift2 and lift3."""

import operator

from fluent_either import Either, Left, Right


class TestAp:
    """Tests for Either.ap()."""

    def test_right_function_right_value(self):
        """A Right function applied to a Right value yields a Right."""
        assert Right(lambda x: x * 2).ap(Right(21)).get() == 42

    def test_left_receiver_returned(self):
        """A Left receiver is returned and the argument ignored."""
        left = Left('e')
        assert left.ap(Right(1)) is left

    def test_left_argument_returned(self):
        """A Right function applied to a Left yields that Left."""
        arg = Left(9)
        assert Right(lambda x: x).ap(arg) is arg

    def test_non_callable_payload_is_soft_noop(self):
        """A Right whose payload is not callable returns itself."""
        receiver = Right(5)
        assert receiver.ap(Right(1)) is receiver

    def test_function_not_called_for_left_argument(self):
        """The wrapped function is never called with a Left payload."""
        calls = []
        Right(calls.append).ap(Left('e'))
        assert calls == []


class TestLiftN:
    """Tests for Either.lift_n()."""

    def test_all_rights(self):
        """A curried function is applied to every payload in order."""
        result = Either.lift_n(lambda a: lambda b: lambda c: a + b + c, Right(18), Right(4), Right(6))
        assert result == Right(28)

    def test_structured_argument(self):
        """Arguments may be any payload the curried function expects."""
        result = Either.lift_n(lambda a: lambda b: a + b['age'], Right(78), Right({'age': 22}))
        assert result == Right(100)

    def test_single_argument(self):
        """lift_n with one Either behaves like map."""
        assert Either.lift_n(lambda a: a * 3, Right(2)) == Right(6)

    def test_first_left_short_circuits(self):
        """The first Left among the arguments is the result."""
        result = Either.lift_n(lambda a: lambda b: lambda c: a + b + c, Right(1), Left('bad'), Right(3))
        assert result.is_left() is True
        assert result.get() == 'bad'

    def test_leading_left_wins_over_later_lefts(self):
        """When several arguments are Left, the earliest one is returned."""
        result = Either.lift_n(lambda a: lambda b: a + b, Left('first'), Left('second'))
        assert result == Left('first')

    def test_extra_arguments_are_soft_noop(self):
        """Once the payload stops being callable, further arguments are ignored."""
        assert Either.lift_n(lambda a: a + 1, Right(1), Right(100)) == Right(2)

    def test_function_not_called_after_left(self):
        """The function is not invoked once a Left has been seen."""
        calls = []

        def curried(a):
            calls.append(a)
            return lambda b: a + b

        result = Either.lift_n(curried, Left('e'), Right(2))

        assert result == Left('e')
        assert calls == []


class TestFixedArityLift:
    """Tests for Either.lift2() and Either.lift3()."""

    def test_lift2_rights(self):
        """lift2 applies an uncurried function to two Rights."""
        add = Either.lift2(operator.add)
        assert add(Right(1), Right(2)) == Right(3)

    def test_lift2_left(self):
        """lift2 returns the first Left."""
        add = Either.lift2(operator.add)
        assert add(Right(1), Left('missing')) == Left('missing')
        assert add(Left('a'), Left('b')) == Left('a')

    def test_lift3_rights(self):
        """lift3 applies an uncurried function to three Rights."""
        full_name = Either.lift3(lambda first, middle, last: f'{first} {middle} {last}')
        assert full_name(Right('Ada'), Right('King'), Right('Lovelace')) == Right('Ada King Lovelace')

    def test_lift3_left(self):
        """lift3 returns the first Left."""
        total = Either.lift3(lambda a, b, c: a + b + c)
        assert total(Right(1), Right(2), Left('no c')) == Left('no c')
