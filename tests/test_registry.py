"""
Unit tests for BundleRegistry.
"""
import threading

from scssbundle.registry import BundleRegistry


class TestContentCache:

    def test_seed_does_not_overwrite(self):
        registry = BundleRegistry()
        registry.seed('/a.scss', 'raw')
        registry.seed('/a.scss', 'other')

        assert registry.get_content('/a.scss') == 'raw'
        assert registry.is_final('/a.scss') is False

    def test_store_replaces_seed_once(self):
        registry = BundleRegistry()
        registry.seed('/a.scss', 'raw')

        assert registry.store('/a.scss', 'bundled') is True
        assert registry.store('/a.scss', 'again') is False
        assert registry.get_content('/a.scss') == 'bundled'
        assert registry.is_final('/a.scss') is True

    def test_preloaded_entries_are_final(self):
        registry = BundleRegistry({'/a.scss': 'x'})

        assert registry.is_final('/a.scss') is True
        assert registry.store('/a.scss', 'y') is False

    def test_missing_content(self):
        registry = BundleRegistry()

        assert registry.has_content('/a.scss') is False
        assert registry.get_content('/a.scss') is None
        assert registry.get_imports('/a.scss') == []


class TestUsageCounter:

    def test_first_use_then_increments(self):
        registry = BundleRegistry()

        assert registry.mark_first_use('/a.scss') == 1
        assert registry.mark_first_use('/a.scss') == 1
        assert registry.increment_usage('/a.scss') == 2
        assert registry.usage('/a.scss') == 2
        assert registry.usage('/b.scss') == 0

    def test_concurrent_increments_are_all_counted(self):
        registry = BundleRegistry()

        def work():
            for _ in range(1000):
                registry.increment_usage('/a.scss')

        threads = [threading.Thread(target=work) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert registry.usage('/a.scss') == 8000


class TestLifecycle:

    def test_in_progress_tracking(self):
        registry = BundleRegistry()
        registry.begin('/a.scss')
        assert registry.in_progress('/a.scss') is True
        registry.end('/a.scss')
        assert registry.in_progress('/a.scss') is False

    def test_clear(self):
        registry = BundleRegistry({'/a.scss': 'x'})
        registry.increment_usage('/a.scss')
        registry.set_imports('/a.scss', [])

        registry.clear()

        assert registry.has_content('/a.scss') is False
        assert registry.is_final('/a.scss') is False
        assert registry.usage('/a.scss') == 0
