import os

import vedro


def _restore_env(name: str, value: str | None):
    if value is None:
        os.environ.pop(name, None)
    else:
        os.environ[name] = value


def env_var_unset(name: str) -> None:
    vedro.defer(_restore_env, name, os.environ.get(name))
    os.environ.pop(name, None)


def env_var_set(name: str, value: str) -> str:
    vedro.defer(_restore_env, name, os.environ.get(name))
    os.environ[name] = value
    return value
