"""Full prefixing: delegate to postcss + autoprefixer as an external command."""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
import tempfile
from collections.abc import Callable, Iterable
from pathlib import Path

from chaincss.errors import PrefixingError
from chaincss.model.result import ProcessResult

logger = logging.getLogger(__name__)

_ANNOTATION_RE = re.compile(r"\n?/\*# sourceMappingURL=(?!data:)[^*]*\*/\s*$")

Runner = Callable[..., subprocess.CompletedProcess]


class PostcssStrategy:
    """Run ``postcss --use autoprefixer`` on the stylesheet.

    Browser targets are passed through the ``BROWSERSLIST`` environment
    variable. The CSS and map are returned verbatim, minus the external-map
    annotation postcss appends (the assembler writes its own).
    """

    name = "full"

    def __init__(
        self,
        browsers: Iterable[str],
        *,
        source_map: bool = True,
        inline: bool = False,
        command: str = "postcss",
        runner: Runner = subprocess.run,
        timeout: float = 60.0,
    ) -> None:
        self.browsers = tuple(browsers)
        self.source_map = source_map
        self.inline = inline
        self.command = command
        self._runner = runner
        self.timeout = timeout

    @staticmethod
    def available(command: str = "postcss") -> bool:
        return shutil.which(command) is not None

    def _args(self, src: Path, dst: Path) -> list[str]:
        args = [self.command, str(src), "--use", "autoprefixer", "--output", str(dst)]
        if not self.source_map:
            args.append("--no-map")
        elif not self.inline:
            args.append("--map")
        # postcss-cli embeds an inline map by default.
        return args

    def process(
        self, css: str, *, source: str = "input.css", target: str = "output.css"
    ) -> ProcessResult:
        with tempfile.TemporaryDirectory(prefix="chaincss-") as tmp:
            src = Path(tmp) / Path(source).name
            dst = Path(tmp) / "out" / Path(target).name
            dst.parent.mkdir()
            src.write_text(css, encoding="utf-8")

            env = dict(os.environ, BROWSERSLIST=", ".join(self.browsers))
            args = self._args(src, dst)
            logger.debug("Running %s", " ".join(args))
            try:
                completed = self._runner(
                    args,
                    capture_output=True,
                    text=True,
                    env=env,
                    timeout=self.timeout,
                    check=False,
                )
            except (OSError, subprocess.TimeoutExpired) as exc:
                raise PrefixingError(f"{self.command} failed to run: {exc}", cause=exc) from exc
            if completed.returncode != 0:
                raise PrefixingError(
                    f"{self.command} exited with status {completed.returncode}: "
                    f"{(completed.stderr or '').strip()}"
                )

            output = dst.read_text(encoding="utf-8")
            map_path = dst.with_name(dst.name + ".map")
            source_map = map_path.read_text(encoding="utf-8") if map_path.is_file() else None
        if source_map is not None:
            output = _ANNOTATION_RE.sub("", output)
        return ProcessResult(css=output, map=source_map)
