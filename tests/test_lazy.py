from betterwall.lazy import LazyView


class Counter:
    def __init__(self):
        self.created = 0

    def make(self):
        self.created += 1
        return {"serial": self.created}


def test_not_loaded_until_accessed():
    counter = Counter()
    view = LazyView(counter.make)
    assert not view.is_loaded()
    assert counter.created == 0


def test_get_creates_once():
    counter = Counter()
    view = LazyView(counter.make)
    first = view.get()
    second = view.get()
    assert first is second
    assert counter.created == 1
    assert view.is_loaded()


def test_on_load_runs_once():
    seen = []
    view = LazyView(Counter().make, on_load=seen.append)
    view.get()
    view.get()
    assert len(seen) == 1
    assert seen[0] is view.get()


def test_ensure_loaded_callback_only_on_first_load():
    seen = []
    view = LazyView(Counter().make)
    created = view.ensure_loaded(seen.append)
    again = view.ensure_loaded(seen.append)
    assert created is again
    assert seen == [created]


def test_on_load_runs_before_extra_callback():
    order = []
    view = LazyView(Counter().make, on_load=lambda v: order.append("stored"))
    view.ensure_loaded(lambda v: order.append("extra"))
    assert order == ["stored", "extra"]


def test_unload_recreates_on_next_access():
    counter = Counter()
    seen = []
    view = LazyView(counter.make, on_load=seen.append)
    first = view.get()
    view.unload()
    assert not view.is_loaded()
    second = view.get()
    assert second is not first
    assert second["serial"] == first["serial"] + 1
    assert len(seen) == 2