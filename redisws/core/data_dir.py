import json
import os
import shutil
import tempfile
from pathlib import Path

from redisws.core.config import Config
from redisws.errors.service import PathOutsideDataDir


class PluginDataDir:
    def __init__(self, root: Path | str):
        self.root = Path(root)

    @classmethod
    def from_config(cls, config: Config) -> 'PluginDataDir':
        return cls(config.require_plugin_dir())

    def path(self, *parts: str) -> Path:
        if not parts:
            return self.root.absolute()

        path = (self.root / Path(*parts)).absolute()
        root = self.root.resolve()
        resolved = path.resolve()
        if resolved == root or not resolved.is_relative_to(root):
            raise PathOutsideDataDir(path)
        return path

    def exists(self, *parts: str) -> bool:
        return self.path(*parts).exists()

    def mkdir(self, *parts: str) -> Path:
        path = self.path(*parts)
        path.mkdir(parents=True, exist_ok=True)
        return path

    def rm(self, *parts: str) -> None:
        path = self.path(*parts)
        if path.is_dir():
            shutil.rmtree(path)
        else:
            path.unlink(missing_ok=True)

    def read_json(self, *parts: str) -> dict:
        with open(self.path(*parts), 'r') as json_file:
            content = json_file.read()
            if not content:
                content = '{}'
            return json.loads(content)

    def write_json(self, data: dict, *parts: str) -> None:
        path = self.path(*parts)
        path.parent.mkdir(parents=True, exist_ok=True)

        # temp file in the target dir, os.replace is atomic within one filesystem
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f'.{path.name}.', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w') as tmp_file:
                json.dump(data, tmp_file, indent=4)
                tmp_file.write('\n')
                tmp_file.flush()
                os.fsync(tmp_file.fileno())
            os.replace(tmp_path, path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
