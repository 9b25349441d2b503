import os
import random
import re
import string
import subprocess
import sys
from pathlib import Path

__repo_root__ = Path(__file__).parent.parent.resolve()


def subprocess_run(*args: str, check=True, **kwargs) -> subprocess.CompletedProcess:
    """Execute a command in a subprocess while properly capturing stderr in exceptions."""
    try:
        p = subprocess.run(args, capture_output=True, check=check, **kwargs)
    except subprocess.CalledProcessError as e:
        print(f"Command {args} failed with stderr: {e.stderr.decode()}")
        print(f"Command {args} failed with stdout: {e.stdout.decode()}")
        raise e
    return p


def generes(*args, cwd=None, check=True):
    """Run the generes command line in a separate interpreter."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(__repo_root__), env.get("PYTHONPATH")) if p
    )
    return subprocess_run(
        sys.executable, "-m", "generes", *args, cwd=cwd, check=check, env=env
    )


def random_string(n: int = 10) -> str:
    """Return random characters and digits."""
    return "".join(random.choices(string.ascii_uppercase + string.digits, k=n))


def random_bytes(n: int) -> bytes:
    return bytes(random.randrange(256) for _ in range(n))


ENTRY_RE = re.compile(r'^    \{ "(?P<alias>[^"]*)", \{ (?P<values>(?:\d+,)*) \} \},$')


def parse_entries(text: str):
    """Return ``(alias, bytes)`` pairs decoded from a generated header."""
    entries = []
    for line in text.splitlines():
        m = ENTRY_RE.match(line)
        if m:
            values = [int(v) for v in m.group("values").split(",") if v]
            entries.append((m.group("alias"), bytes(values)))
    return entries


def write_resource(directory: Path, name: str, data: bytes) -> Path:
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path
