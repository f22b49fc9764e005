import pytest

from core.container import Container


class Counter:
    created = 0

    def __init__(self):
        Counter.created += 1


def test_resolve_returns_same_instance_for_same_key():
    container = Container()

    first = container.resolve(Counter)
    second = container.resolve(Counter)

    assert first is second
    assert Counter in container


def test_resolve_imports_dotted_path():
    container = Container()

    instance = container.resolve("collections.OrderedDict")

    assert type(instance).__name__ == "OrderedDict"
    assert container.resolve("collections.OrderedDict") is instance


def test_bound_factory_wins_over_import():
    container = Container()
    container.bind("settings-dict", lambda: {"currency": "EUR"})

    assert container.resolve("settings-dict") == {"currency": "EUR"}


def test_rebinding_drops_cached_instance():
    container = Container()
    container.bind("value", lambda: [1])
    old = container.resolve("value")

    container.bind("value", lambda: [2])

    assert container.resolve("value") == [2]
    assert container.resolve("value") is not old


def test_forget_creates_fresh_instance():
    container = Container()
    old = container.resolve(Counter)

    container.forget(Counter)

    assert container.resolve(Counter) is not old


def test_separate_containers_do_not_share_instances():
    assert Container().resolve(Counter) is not Container().resolve(Counter)


def test_unknown_dotted_path_raises_import_error():
    with pytest.raises(ImportError):
        Container().resolve("no_such_module.Thing")
