"""
Shared fixtures for deployer tests
"""

import json
import pytest
from unittest.mock import Mock
from web3.datastructures import AttributeDict


# Ganache deterministic account 0
SENDER = '0x90f8bf6a479f320ead074411a4b0e7944ea8c9c1'
CONTRACT_ADDRESS = '0xe78A0F7E598Cc8b0Bb87894B0F60dD2a88d6a8Ab'
TX_HASH = bytes.fromhex('ab' * 32)

SIMPLE_STORAGE_ABI = [
    {
        "inputs": [{"name": "key", "type": "string"}, {"name": "value", "type": "string"}],
        "name": "put",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"name": "key", "type": "string"}],
        "name": "get",
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function"
    }
]
SIMPLE_STORAGE_BYTECODE = '0x608060405234801561001057600080fd5b50'


def make_receipt(contract_address=CONTRACT_ADDRESS, status=1):
    return AttributeDict({
        'transactionHash': TX_HASH,
        'blockNumber': 7,
        'gasUsed': 412345,
        'status': status,
        'contractAddress': contract_address
    })


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep diagnostics off unless a test turns them on"""
    monkeypatch.delenv('DEPLOYER_LOG_LEVEL', raising=False)
    monkeypatch.delenv('DEPLOYER_LOG_FILE', raising=False)


@pytest.fixture
def artifact_file(tmp_path):
    """Truffle-style compiled artifact on disk"""
    path = tmp_path / 'SimpleStorage.json'
    path.write_text(json.dumps({
        'contractName': 'SimpleStorage',
        'abi': SIMPLE_STORAGE_ABI,
        'bytecode': SIMPLE_STORAGE_BYTECODE
    }), encoding='utf-8')
    return str(path)


@pytest.fixture
def w3():
    """Mock Web3 instance whose node mines every deployment"""
    w3 = Mock()
    contract = Mock()
    contract.constructor.return_value.transact.return_value = TX_HASH
    w3.eth.contract.return_value = contract
    w3.eth.wait_for_transaction_receipt.return_value = make_receipt()
    return w3
