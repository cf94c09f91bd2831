"""Tests for the single-slot render cache."""

import threading

from tasmap.core.cache import RenderCache
from tasmap.core.domain import RenderedMap


def make_map(index: int) -> RenderedMap:
    return RenderedMap(
        taxon_name=f"Taxon {index}",
        map_type="plain",
        svg_body=f"<svg id='{index}'/>",
    )


class TestRenderCache:
    def test_load_before_store_is_absent(self):
        cache = RenderCache()

        assert cache.load() is None
        assert cache.is_present is False

    def test_store_then_load_returns_same_map(self):
        cache = RenderCache()
        rendered = make_map(1)

        cache.store(rendered)

        assert cache.load() is rendered
        assert cache.load() is rendered
        assert cache.is_present is True

    def test_store_overwrites(self):
        cache = RenderCache()
        cache.store(make_map(1))
        cache.store(make_map(2))

        assert cache.load() == make_map(2)

    def test_concurrent_store_and_load_never_mix_fields(self):
        cache = RenderCache()
        stored = {make_map(i) for i in range(50)}
        observed = []
        observed_lock = threading.Lock()
        start = threading.Barrier(20)

        def writer(maps):
            start.wait()
            for rendered in maps:
                cache.store(rendered)

        def reader():
            start.wait()
            local = [cache.load() for _ in range(200)]
            with observed_lock:
                observed.extend(local)

        ordered = sorted(stored, key=lambda m: m.taxon_name)
        threads = [
            threading.Thread(target=writer, args=(ordered[i::10],)) for i in range(10)
        ] + [threading.Thread(target=reader) for _ in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for value in observed:
            assert value is None or value in stored
            if value is not None:
                index = value.taxon_name.split()[-1]
                assert value.svg_body == f"<svg id='{index}'/>"
        assert cache.load() in stored
