import importlib.util
import random
from pathlib import Path
from types import ModuleType

UINT32_MOD = 1 << 32
BOUNDARY_PATTERNS = (0, 1, 2, 0x7FFFFFFF, 0x80000000, 0x80000001, 0xFFFFFFFF)


def load_script_module(script: Path, module_name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(module_name, script)
    if spec is None or spec.loader is None:
        raise RuntimeError(f"Failed to load script module from {script}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def reference_bits(value: int) -> int:
    return value % UINT32_MOD


def reference_signed(bits: int) -> int:
    return bits - UINT32_MOD if bits >= (1 << 31) else bits


def random_patterns(rng: random.Random, count: int) -> list[int]:
    return list(BOUNDARY_PATTERNS) + [
        rng.randrange(UINT32_MOD) for _ in range(count)
    ]
