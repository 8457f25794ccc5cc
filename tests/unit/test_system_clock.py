from datetime import datetime

from filesender.clock import SystemClock


class TestSystemClock:
    def test_returns_naive_local_now(self) -> None:
        before = datetime.now()
        now = SystemClock().now()
        after = datetime.now()

        assert now.tzinfo is None
        assert before <= now <= after
