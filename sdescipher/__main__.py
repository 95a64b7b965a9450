"""
Command-line demonstration of the cipher.

Run:
    python -m sdescipher "some text"
    python -m sdescipher --key 1010000010 --random-params --seed 7 "some text"
"""

import sys
import random
import argparse
import logging
from typing import List, Optional

from .bits import bits_to_string
from .cipher_core import ParameterSet, SDESCipher
from .config import DEMO_KEY, DEMO_PLAINTEXT, get_log_level
from .exceptions import CipherError
from .key_schedule import key_from_string, derive_key_from_password

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sdescipher',
        description='Encrypt and decrypt text with the simplified DES cipher.')
    parser.add_argument('text', nargs='?', default=DEMO_PLAINTEXT,
                        help='Text of single-byte characters (default: %(default)s)')
    key_group = parser.add_mutually_exclusive_group()
    key_group.add_argument('--key', help='10-bit key such as 0001010011')
    key_group.add_argument('--password', help='Derive the key from a password with Argon2id')
    parser.add_argument('--salt', type=bytes.fromhex, help='Hex salt for --password (random if omitted)')
    parser.add_argument('--random-params', action='store_true',
                        help='Generate random tables and S-boxes instead of the standard set')
    parser.add_argument('--seed', type=int, help='Seed for --random-params')
    parser.add_argument('--show-params', action='store_true',
                        help='Print the parameter set as JSON')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=get_log_level(),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    args = build_parser().parse_args(argv)

    try:
        if args.password is not None:
            key, salt = derive_key_from_password(args.password, args.salt)
            print(f"Salt:\t\t {salt.hex()}")
        elif args.key is not None:
            key = key_from_string(args.key)
        else:
            key = list(DEMO_KEY)

        if args.random_params:
            rng = random.Random(args.seed)
            cipher = SDESCipher(key, ParameterSet.random(rng))
        else:
            cipher = SDESCipher(key)

        encrypted = cipher.encrypt_text(args.text)
        decrypted = cipher.decrypt_text(encrypted)
    except CipherError as e:
        logger.error(f"Cipher error: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 2

    key1, key2 = cipher.subkeys
    print(f"Key:\t\t {bits_to_string(cipher.key)}")
    print(f"Subkeys:\t {bits_to_string(key1)} {bits_to_string(key2)}")
    if args.show_params:
        print(f"Parameters:\t {cipher.params.to_json()}")
    print(f"Encrypted:\t {encrypted!r}")
    print(f"Encrypted hex:\t {encrypted.encode('latin-1').hex()}")
    print(f"Decrypted:\t {decrypted}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
