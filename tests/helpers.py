"""Test helpers: a recording stand-in for external commands."""

import io
import os
import tarfile
from pathlib import Path
from typing import Optional, Sequence

PIPELINE_STEPS = ["pull", "create", "export", "unpack", "pack", "import"]


def step_of(argv: Sequence[str]) -> str:
    """Name the pipeline step an argv belongs to."""
    if "import" in argv:
        return "import"
    if "-xf" in argv:
        return "unpack"
    if "-cf" in argv:
        return "pack"
    return argv[1]


def make_rootfs_tar(path: Path) -> None:
    """Write a tiny root filesystem archive to ``path``."""
    content = b'NAME="Fedora Linux"\n'
    with tarfile.open(path, "w") as tar:
        info = tarfile.TarInfo("etc/os-release")
        info.size = len(content)
        tar.addfile(info, fileobj=io.BytesIO(content))


class FakeRunner:
    """Records commands and imitates podman, tar and brl side effects."""

    def __init__(self, fail_step: Optional[str] = None, returncode: int = 1):
        self.fail_step = fail_step
        self.returncode = returncode
        self.calls: list[list[str]] = []
        self.packed_members: list[str] = []
        self.packed_metadata: dict[str, str] = {}

    @property
    def steps(self) -> list[str]:
        return [step_of(argv) for argv in self.calls]

    async def __call__(
        self,
        argv: Sequence[str],
        stdout_path: Optional[Path] = None,
        quiet: bool = False,
    ) -> int:
        argv = list(argv)
        self.calls.append(argv)
        step = step_of(argv)
        if step == self.fail_step:
            return self.returncode

        if step == "export":
            make_rootfs_tar(stdout_path)
        elif step == "unpack":
            target = Path(argv[argv.index("-C") + 1])
            (target / "etc").mkdir()
            (target / "etc" / "os-release").write_text('NAME="Fedora Linux"\n')
        elif step == "pack":
            self._pack(Path(argv[argv.index("-C") + 1]), Path(argv[argv.index("-cf") + 1]))
        return 0

    def _pack(self, source: Path, archive: Path) -> None:
        with tarfile.open(archive, "w") as tar:
            tar.add(source, arcname=".")
        with tarfile.open(archive, "r") as tar:
            members = {os.path.normpath(m.name): m for m in tar.getmembers()}
            self.packed_members = sorted(members)
            for name in ("layer", "version"):
                member = tar.extractfile(members[f"bedrock/{name}"])
                self.packed_metadata[name] = member.read().decode("utf-8")
