import importlib.util
import os
import re

from scripts.utils import log


DEPLOY_SCRIPTS_DIR = "./deploy"


class OperationError(Exception):
    """
    Error representing an exception that occurs while executing a deploy script.
    Provides the `script` path so the operator knows what to fix and re-run.
    """

    def __init__(self, script, message="An error occurred while executing deploy script"):
        self.script = script
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        if self.script is None:
            return self.message
        return f"{self.message}. Failed script: {self.script}"


def load_script(filename):
    # unique per path, deploy scripts share file names across areas
    name = re.sub(r"\W", "_", os.path.splitext(os.path.abspath(filename))[0])
    spec = importlib.util.spec_from_file_location(name, filename)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class OperationRunner:
    """
    Finds deploy scripts by tag and runs them.

    A deploy script is any `.py` file under the scripts directory that
    defines `TAGS` (a list of names) and `run(operation)`.
    """

    def __init__(self, scripts_dir=DEPLOY_SCRIPTS_DIR):
        self.scripts_dir = scripts_dir

    def scripts(self):
        # `(filename, module)` for every deploy script, in path order
        found = []
        for root, _, files in os.walk(self.scripts_dir):
            for file in files:
                if file.endswith(".py") and not file.startswith("_"):
                    found.append(os.path.join(root, file))

        # sort order of `os.walk` is not guaranteed
        scripts = []
        for filename in sorted(found):
            module = load_script(filename)
            if hasattr(module, "TAGS") and hasattr(module, "run"):
                scripts.append((filename, module))
        return scripts

    def select(self, tags):
        wanted = {tag.lower() for tag in tags}
        return [
            (filename, module)
            for filename, module in self.scripts()
            if wanted & {tag.lower() for tag in module.TAGS}
        ]

    def run(self, operation, tags):
        selected = self.select(tags)
        if not selected:
            raise OperationError(None, f"No deploy script tagged {', '.join(tags)} in {self.scripts_dir}")

        for filename, module in selected:
            log.h1(f"Running {filename} ({', '.join(module.TAGS)})...")
            try:
                module.run(operation)
            except Exception as exception:
                raise OperationError(filename) from exception

        return [filename for filename, _ in selected]
