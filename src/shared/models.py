import importlib

from src.core.utils.utils import get_app_paths, module_name_from_path

for paths in get_app_paths("models").values():
    for path in paths.values():
        importlib.import_module(module_name_from_path(path))
