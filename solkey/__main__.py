"""
Demo: print the Solana addresses for the first accounts of a mnemonic along m/44'/501'/i'/0'
"""
import argparse

from solkey.core import SOLANA, SolKeyError, get_logger
from solkey.wallet import derive_account

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="solkey", description="Derive Solana addresses from a BIP-39 mnemonic")
    parser.add_argument("--mnemonic", default=SOLANA.DEMO_MNEMONIC, help="space separated mnemonic phrase")
    parser.add_argument("--passphrase", default="", help="optional BIP-39 passphrase")
    parser.add_argument("--count", type=int, default=SOLANA.DEFAULT_ACCOUNTS, help="number of accounts to derive")
    args = parser.parse_args(argv)

    print(f"Mnemonic: \"{args.mnemonic}\"")
    try:
        for i in range(args.count):
            account = derive_account(args.mnemonic, passphrase=args.passphrase, account=i)
            print(f"{account.path}  {account.address}")
    except SolKeyError as e:
        logger.error(f"Derivation failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
