"""
Contract Deployer
Submits a single contract creation transaction and reads back its address
"""

from dataclasses import dataclass
from typing import Optional
from web3 import Web3
from loguru import logger

from .artifact import CompiledArtifact
from .errors import DeploymentFailedError

# Fixed allowance for the constructor; not exposed on the command line
GAS_LIMIT = 2_000_000


@dataclass(frozen=True)
class DeploymentResult:
    """On-chain outcome of a successful deployment"""

    address: str
    tx_hash: str
    block_number: Optional[int] = None
    gas_used: Optional[int] = None


class ContractDeployer:
    """
    Deploys compiled contracts through an injected Web3 handle

    The sender must be an account the node can sign for
    (eth_sendTransaction), e.g. an unlocked geth or Ganache account.
    """

    def __init__(self, w3: Web3):
        """
        Initialize Contract Deployer

        Args:
            w3: Web3 instance connected (lazily) to the target node
        """
        self.w3 = w3

    def deploy(
        self,
        artifact: CompiledArtifact,
        sender: str,
        gas_limit: int = GAS_LIMIT
    ) -> DeploymentResult:
        """
        Deploy a contract and wait for it to be mined

        Args:
            artifact: Compiled contract (abi + bytecode)
            sender: Account the creation transaction is sent from
            gas_limit: Gas allowance for the constructor

        Returns:
            DeploymentResult for the mined transaction

        Raises:
            DeploymentFailedError: receipt resolved without a usable address
        """
        sender = Web3.to_checksum_address(sender)

        Contract = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)

        logger.info(f"Deploying {artifact.display_name} from {sender} (gas limit {gas_limit})")

        tx_hash = Contract.constructor().transact({
            'from': sender,
            'gas': gas_limit
        })
        tx_hash_hex = Web3.to_hex(tx_hash)

        logger.info(f"Transaction sent: {tx_hash_hex}")
        logger.info("Waiting for confirmation...")

        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash)

        contract_address = receipt.get('contractAddress')
        status = receipt.get('status')

        if status == 0:
            logger.error(f"Deployment transaction reverted: {tx_hash_hex}")
            raise DeploymentFailedError(tx_hash=tx_hash_hex)

        if not contract_address:
            logger.error(f"Receipt for {tx_hash_hex} carries no contract address")
            raise DeploymentFailedError(tx_hash=tx_hash_hex)

        result = DeploymentResult(
            address=contract_address,
            tx_hash=tx_hash_hex,
            block_number=receipt.get('blockNumber'),
            gas_used=receipt.get('gasUsed')
        )

        logger.success(f"Contract deployed at {result.address}")
        logger.debug(f"Block: {result.block_number}, gas used: {result.gas_used}")

        return result
