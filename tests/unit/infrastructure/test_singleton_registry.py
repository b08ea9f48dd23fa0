"""Tests for the singleton registry and accessor."""

import threading
import time

import pytest

from designkit.infrastructure.patterns import (
    AppLogger,
    SingletonRegistry,
    SingletonService,
    get_singleton,
    reset_singletons,
)


class SlowService(SingletonService):
    """Service whose construction is slow enough for threads to race on it."""

    constructed = 0
    _count_lock = threading.Lock()

    def __init__(self):
        time.sleep(0.01)
        with SlowService._count_lock:
            SlowService.constructed += 1


class PlainService:
    def __init__(self, name="default"):
        self.name = name


class TestSingletonRegistry:
    """Test singleton registry behaviour."""

    def setup_method(self):
        SlowService.constructed = 0

    def test_registry_is_process_wide(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_same_instance_returned(self):
        first = get_singleton(PlainService)
        second = get_singleton(PlainService)

        assert first is second

    def test_constructor_arguments_only_used_on_first_call(self):
        first = get_singleton(PlainService, name="first")
        second = get_singleton(PlainService, name="second")

        assert second is first
        assert second.name == "first"

    def test_lazy_initialization(self):
        registry = SingletonRegistry.get_instance()
        assert not registry.has(PlainService)

        get_singleton(PlainService)

        assert registry.has(PlainService)

    @pytest.mark.parametrize("threads", [2, 8, 32])
    def test_concurrent_first_calls_construct_exactly_one_instance(self, threads):
        barrier = threading.Barrier(threads)
        results = []
        results_lock = threading.Lock()

        def worker():
            barrier.wait()
            instance = get_singleton(SlowService)
            with results_lock:
                results.append(instance)

        workers = [threading.Thread(target=worker) for _ in range(threads)]
        for worker_thread in workers:
            worker_thread.start()
        for worker_thread in workers:
            worker_thread.join()

        assert SlowService.constructed == 1
        assert len(results) == threads
        assert all(instance is results[0] for instance in results)

    def test_direct_construction_is_rejected(self):
        with pytest.raises(TypeError, match="get_singleton"):
            AppLogger()

    def test_separate_registry_constructs_guarded_service(self):
        registry = SingletonRegistry()

        local = registry.get(AppLogger, channel="local")

        assert registry.get(AppLogger) is local
        assert local.channel == "local"
        assert get_singleton(AppLogger) is not local
        assert not SingletonRegistry.is_constructing(AppLogger)

    def test_reset_drops_instances(self):
        first = get_singleton(AppLogger)

        reset_singletons()
        second = get_singleton(AppLogger)

        assert first is not second

    def test_remove_single_class(self):
        registry = SingletonRegistry.get_instance()
        first = get_singleton(PlainService)

        registry.remove(PlainService)

        assert get_singleton(PlainService) is not first


class TestAppLogger:
    """Test the shared application log service."""

    def test_all_callers_share_entries(self):
        get_singleton(AppLogger).log("first")
        get_singleton(AppLogger).log("second")

        assert get_singleton(AppLogger).entries == ["first", "second"]

    def test_entries_is_a_copy(self):
        app_logger = get_singleton(AppLogger)
        app_logger.log("message")

        app_logger.entries.append("tampered")

        assert app_logger.entries == ["message"]

    def test_oldest_entries_evicted(self):
        app_logger = get_singleton(AppLogger, max_entries=3)
        for index in range(5):
            app_logger.log(f"message {index}")

        assert app_logger.max_entries == 3
        assert app_logger.entries == ["message 2", "message 3", "message 4"]

    def test_max_entries_must_be_positive(self):
        with pytest.raises(ValueError):
            get_singleton(AppLogger, max_entries=0)
