"""
main.py

Command-line entry point. Streams every transaction of an address and prints
each one as a JSON line on stdout.

Environment:
    COVALENT_API_KEY: The API key.
    COVALENT_CHAIN: Chain name, e.g. `eth-mainnet`.
    COVALENT_ADDRESS: The wallet address to stream.
"""

import os
import sys

from covalent_sdk.client import CovalentClient
from covalent_sdk.utils.logger import get_logger
from covalent_sdk.utils.sentry import close_sentry, init_sentry

# Initialize logger
logger = get_logger(__name__)


def main() -> int:
    """
    Streams transactions for COVALENT_ADDRESS on COVALENT_CHAIN.

    :return: The process exit status: 0 on success, 1 on error.
    """
    api_key = os.getenv("COVALENT_API_KEY")
    if not api_key:
        logger.error("Covalent API key is missing. Set 'COVALENT_API_KEY' environment variable.")
        return 1

    chain = os.getenv("COVALENT_CHAIN", "eth-mainnet")
    address = os.getenv("COVALENT_ADDRESS")
    if not address:
        logger.error("Wallet address is missing. Set 'COVALENT_ADDRESS' environment variable.")
        return 1

    init_sentry()
    count = 0
    try:
        with CovalentClient(api_key=api_key) as client:
            logger.info(f"Streaming transactions for {address} on {chain}")
            stream = client.transaction_service.get_all_transactions_for_address(chain, address)
            with stream:
                for record in stream:
                    if not record.ok:
                        logger.error(f"Stream ended with an error after {count} transactions: {record.error}")
                        return 1
                    sys.stdout.write(record.value.model_dump_json() + "\n")
                    count += 1
    finally:
        close_sentry()

    logger.info(f"Streamed {count} transactions for {address}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
