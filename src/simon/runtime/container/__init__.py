from lagom import Container

RuntimeContainer = Container


def build_runtime_container(*args, **kwargs):  # type: ignore[override]
    from simon.runtime.container.initialize import build_runtime_container as build

    return build(*args, **kwargs)
