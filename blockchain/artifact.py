"""
Compiled Artifact Loader
Reads abi and bytecode from Truffle / Hardhat / solc JSON output
"""

import json
import string
from dataclasses import dataclass
from typing import Dict, List, Optional
from loguru import logger

from .errors import FileAccessError, MalformedArtifactError

HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class CompiledArtifact:
    """Executable bytecode plus the interface needed to deploy it"""

    abi: List[Dict]
    bytecode: str
    path: str
    contract_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.contract_name or self.path


def load_artifact(path: str) -> CompiledArtifact:
    """
    Load a compiled contract artifact

    Args:
        path: Path to a JSON file holding at least "abi" and "bytecode"

    Returns:
        CompiledArtifact with bytecode normalised to a 0x-prefixed string

    Raises:
        FileAccessError: the file cannot be opened or read
        MalformedArtifactError: the content is not JSON or has the wrong shape
    """
    try:
        with open(path, 'rb') as f:
            raw = f.read()
    except OSError as e:
        raise FileAccessError(e.errno, f"Cannot read contract artifact: {e.strerror}", path) from e

    try:
        contract_json = json.loads(raw.decode('utf-8'))
    except UnicodeDecodeError as e:
        raise MalformedArtifactError(f"Contract artifact {path} is not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise MalformedArtifactError(f"Contract artifact {path} is not valid JSON: {e}") from e

    if not isinstance(contract_json, dict):
        raise MalformedArtifactError(f"Contract artifact {path} must be a JSON object")

    abi = _parse_abi(contract_json, path)
    bytecode = _parse_bytecode(contract_json, path)

    contract_name = contract_json.get('contractName')
    if not isinstance(contract_name, str):
        contract_name = None

    artifact = CompiledArtifact(
        abi=abi,
        bytecode=bytecode,
        path=path,
        contract_name=contract_name
    )

    logger.debug(
        f"Loaded artifact {artifact.display_name}: "
        f"{len(abi)} abi entries, {(len(bytecode) - 2) // 2} bytes of bytecode"
    )
    return artifact


def _parse_abi(contract_json: Dict, path: str) -> List[Dict]:
    if 'abi' not in contract_json:
        raise MalformedArtifactError(f"Contract artifact {path} has no 'abi' field")

    abi = contract_json['abi']
    if not isinstance(abi, list) or not all(isinstance(entry, dict) for entry in abi):
        raise MalformedArtifactError(
            f"Contract artifact {path}: 'abi' must be a list of interface descriptors"
        )
    return abi


def _parse_bytecode(contract_json: Dict, path: str) -> str:
    if 'bytecode' not in contract_json:
        raise MalformedArtifactError(f"Contract artifact {path} has no 'bytecode' field")

    bytecode = contract_json['bytecode']
    if not isinstance(bytecode, str):
        raise MalformedArtifactError(f"Contract artifact {path}: 'bytecode' must be a hex string")

    digits = bytecode.strip()
    if digits[:2] in ('0x', '0X'):
        digits = digits[2:]

    if not digits:
        raise MalformedArtifactError(f"Contract artifact {path}: 'bytecode' is empty")

    # Unlinked library placeholders (__$...$__) also fail here
    if len(digits) % 2 or not HEX_DIGITS.issuperset(digits):
        raise MalformedArtifactError(f"Contract artifact {path}: 'bytecode' is not valid hex")

    return '0x' + digits
