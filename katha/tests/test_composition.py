import asyncio
from katha.composition import (
    compose,
    compose_predicates,
    identity,
    pipe,
    thread_first,
)
from katha.errors import InvalidFunctionFormatError
from hypothesis import given
import hypothesis.strategies as st
import unittest


def add2(x):
    return x + 2


def multiply_by_3(x):
    return x * 3


def double(x):
    return x * 2


def add_three(x):
    return x + 3


async def async_double(x):
    await asyncio.sleep(0)
    return x * 2


class TestIdentity(unittest.TestCase):
    def test_returns_input(self) -> None:
        self.assertEqual(5, identity(5))
        self.assertEqual('test', identity('test'))
        mapping = {'a': 1, 'b': 2}
        self.assertIs(mapping, identity(mapping))


class TestCompose(unittest.TestCase):
    def test_right_to_left(self) -> None:
        self.assertEqual(4 * 3 + 2, compose(add2, multiply_by_3)(4))

    def test_no_functions(self) -> None:
        self.assertEqual(5, compose()(5))

    @given(st.integers())
    def test_identity_is_neutral(self, x: int) -> None:
        self.assertEqual(
            compose(add2, identity)(x), compose(identity, add2)(x)
        )

    @given(st.integers())
    def test_associative(self, x: int) -> None:
        self.assertEqual(
            compose(compose(add2, double), multiply_by_3)(x),
            compose(add2, compose(double, multiply_by_3))(x),
        )


class TestPipe(unittest.TestCase):
    def test_left_to_right(self) -> None:
        self.assertEqual(7, pipe(double, add_three)(2))

    def test_no_functions(self) -> None:
        self.assertEqual(5, pipe()(5))

    @given(st.integers())
    def test_pipe_is_reversed_compose(self, x: int) -> None:
        self.assertEqual(
            pipe(double, add_three, multiply_by_3)(x),
            compose(multiply_by_3, add_three, double)(x),
        )


class TestPipeAsync(unittest.IsolatedAsyncioTestCase):
    async def test_mixed_steps(self) -> None:
        self.assertEqual(11, await pipe(double, async_double, add_three)(2))

    async def test_all_asynchronous(self) -> None:
        self.assertEqual(8, await pipe(async_double, async_double)(2))

    async def test_initial_asynchronous_step(self) -> None:
        self.assertEqual(11, await pipe(async_double, double, add_three)(2))

    async def test_awaitable_initial_value(self) -> None:
        self.assertEqual(7, await pipe(add_three)(async_double(2)))

    async def test_last_awaitable_is_returned_as_is(self) -> None:
        future = asyncio.get_running_loop().create_future()
        self.assertIs(future, pipe(double, lambda _: future)(2))
        future.cancel()


class TestThreadFirst(unittest.TestCase):
    def test_mixed_steps(self) -> None:
        result = thread_first(
            '3',
            int,
            [lambda x, y: x + y, 3],
            [lambda x, y: x - y, 10],
            str,
        )
        self.assertEqual('-4', result)

    def test_only_functions(self) -> None:
        result = thread_first(
            5, lambda x: x + 3, lambda x: x * 2, lambda x: 5 - x
        )
        self.assertEqual(5 - (5 + 3) * 2, result)

    def test_tuple_step(self) -> None:
        result = thread_first(2, (pow, 2), (lambda x, y: x * y, 3))
        self.assertEqual(12, result)

    def test_no_steps(self) -> None:
        self.assertEqual(5, thread_first(5))

    def test_invalid_step(self) -> None:
        for step in (123, [], (1, 2), 'add'):
            with self.subTest(step=step):
                with self.assertRaises(InvalidFunctionFormatError) as cm:
                    thread_first(5, step)
                self.assertEqual('Invalid function format', str(cm.exception))
                self.assertIs(step, cm.exception.step)

    def test_invalid_step_is_a_type_error(self) -> None:
        with self.assertRaisesRegex(TypeError, 'Invalid function format'):
            thread_first(5, 123)


class TestComposePredicates(unittest.TestCase):
    def setUp(self) -> None:
        self.is_even_and_positive = compose_predicates(
            lambda x: x % 2 == 0, lambda x: x > 0
        )

    def test_all_hold(self) -> None:
        self.assertIs(True, self.is_even_and_positive(4))

    def test_one_fails(self) -> None:
        self.assertIs(False, self.is_even_and_positive(-2))
        self.assertIs(False, self.is_even_and_positive(3))

    def test_no_predicates(self) -> None:
        self.assertIs(True, compose_predicates()(None))

    def test_short_circuits(self) -> None:
        seen = []

        def never(x):
            seen.append(x)
            return False

        compose_predicates(lambda x: False, never)(1)
        self.assertEqual([], seen)
