"""Tests for junction._internal.atomic — AtomicRef."""

from concurrent.futures import ThreadPoolExecutor

from junction._internal.atomic import AtomicRef


class TestAtomicRef:
    def test_get_set(self) -> None:
        ref = AtomicRef((1,))
        ref.set((2,))
        assert ref.get() == (2,)

    def test_compare_and_set_success(self) -> None:
        old = (1,)
        ref = AtomicRef(old)
        assert ref.compare_and_set(old, (2,)) is True
        assert ref.get() == (2,)

    def test_compare_and_set_uses_identity(self) -> None:
        ref = AtomicRef([1])
        assert ref.compare_and_set([1], [2]) is False
        assert ref.get() == [1]

    def test_no_lost_updates(self) -> None:
        ref = AtomicRef(0)

        def increment(_: int) -> None:
            while True:
                current = ref.get()
                if ref.compare_and_set(current, current + 1):
                    return

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(increment, range(500)))

        assert ref.get() == 500
