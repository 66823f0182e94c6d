"""
Known-Answer Self Test and Backend Cross-Check

Two ways to confirm the from-scratch engines are computing real SHA-2:
- run_self_test(): hashes the published NIST example messages (plus a long
  multi-block message) with every variant and compares against fixed answers
- cross_check(): hashes arbitrary data here and with the OpenSSL-backed
  implementation in the `cryptography` package and compares the two

Both raise SelfTestError on the first disagreement.
"""

import logging
from typing import Dict, Optional

from cryptography.hazmat.primitives import hashes

from .errors import SelfTestError
from .variants import VARIANTS, get_variant


logger = logging.getLogger(__name__)


# ============================================================================
# Known Answers
# ============================================================================

MSG_448 = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"
MSG_896 = (
    b"abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmn"
    b"hijklmnoijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu"
)

# 860 bytes of UTF-8 text: 14 blocks for SHA-256, 7 blocks for SHA-512
LONG_MESSAGE = (
    "Bangladesh is a country of stunning natural beauty, where vibrant landscapes "
    "unfold in every direction. The lush, green countryside is adorned with sprawling "
    "rice paddies and meandering rivers, with the mighty Ganges, Brahmaputra, and "
    "Meghna rivers converging to create a labyrinth of waterways that are vital to "
    "the nation's life. The serene Sundarbans mangrove forest, a UNESCO World Heritage "
    "Site, is home to the elusive Bengal tiger and a rich array of wildlife, while the "
    "rolling hills of the Chittagong Hill Tracts offer breathtaking vistas and serene "
    "spots for reflection. The picturesque Cox’s Bazar boasts the world's longest "
    "natural sea beach, where golden sands meet the shimmering Bay of Bengal. "
    "Throughout the country, the natural beauty is complemented by a warm and "
    "welcoming culture, creating a landscape as rich in heart as it is in scenery."
).encode('utf-8')

KNOWN_ANSWERS: Dict[str, Dict[bytes, str]] = {
    "SHA-256": {
        b"": "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
        b"abc": "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
        MSG_448: "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1",
        MSG_896: "cf5b16a778af8380036ce59e7b0492370b249b11e8f07a51afac45037afee9d1",
        LONG_MESSAGE: "32ce66b1c62d176f259d153156d1cb1e80349ac08f272d6a3e0498623b67c81b",
    },
    "SHA-224": {
        b"": "d14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f",
        b"abc": "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7",
        MSG_448: "75388b16512776cc5dba5da1fd890150b0c6455cb4f58b1952522525",
        MSG_896: "c97ca9a559850ce97a04a96def6d99a9e0e0e2ab14e6b8df265fc0b3",
        LONG_MESSAGE: "562ade37aa31cebfa14b8eb2e5a830c1de2fca5e69513bfe94eeeef6",
    },
    "SHA-512": {
        b"": (
            "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
            "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
        ),
        b"abc": (
            "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
            "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
        ),
        MSG_448: (
            "204a8fc6dda82f0a0ced7beb8e08a41657c16ef468b228a8279be331a703c335"
            "96fd15c13b1b07f9aa1d3bea57789ca031ad85c7a71dd70354ec631238ca3445"
        ),
        MSG_896: (
            "8e959b75dae313da8cf4f72814fc143f8f7779c6eb9f7fa17299aeadb6889018"
            "501d289e4900f7e4331b99dec4b5433ac7d329eeb6dd26545e96e55b874be909"
        ),
        LONG_MESSAGE: (
            "c5277b97cf1fee58d398f8a112c156fdf5e0fb07f6e2a4222277fdf316412d84"
            "da29533998b58b8f1fff4100d37a4055c1a36414e41308ffc1d70dc7602d27e0"
        ),
    },
    "SHA-384": {
        b"": (
            "38b060a751ac96384cd9327eb1b1e36a21fdb71114be0743"
            "4c0cc7bf63f6e1da274edebfe76f65fbd51ad2f14898b95b"
        ),
        b"abc": (
            "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded163"
            "1a8b605a43ff5bed8086072ba1e7cc2358baeca134c825a7"
        ),
        MSG_448: (
            "3391fdddfc8dc7393707a65b1b4709397cf8b1d162af05ab"
            "fe8f450de5f36bc6b0455a8520bc4e6f5fe95b1fe3c8452b"
        ),
        MSG_896: (
            "09330c33f71147e83d192fc782cd1b4753111b173b3b05d2"
            "2fa08086e3b0f712fcc7c71a557e2db966c3e9fa91746039"
        ),
        LONG_MESSAGE: (
            "d49233f7fed6cb61d556934e11ea9c82b86a9e4bfcd4aa48"
            "ba2140b9cf85ae0daf414a8d68aa7b4a9b752d8d9be6a041"
        ),
    },
    "SHA-512/224": {
        b"": "6ed0dd02806fa89e25de060c19d3ac86cabb87d6a0ddd05c333b84f4",
        b"abc": "4634270f707b6a54daae7530460842e20e37ed265ceee9a43e8924aa",
        MSG_448: "e5302d6d54bb242275d1e7622d68df6eb02dedd13f564c13dbda2174",
        MSG_896: "23fec5bb94d60b23308192640b0c453335d664734fe40e7268674af9",
        LONG_MESSAGE: "c60eb03a1ae4093f39b7d26659a5c41d56a2cf4b5e1071ec13e5cb9f",
    },
    "SHA-512/256": {
        b"": "c672b8d1ef56ed28ab87c3622c5114069bdd3ad7b8f9737498d0c01ecef0967a",
        b"abc": "53048e2681941ef99b2e29b76b4c7dabe4c2d0c634fc6d46e0e2f13107e7af23",
        MSG_448: "bde8e1f9f19bb9fd3406c90ec6bc47bd36d8ada9f11880dbc8a22a7078b6a461",
        MSG_896: "3928e184fb8690f840da3988121d31be65cb9d3ef83ee6146feac861e19b563a",
        LONG_MESSAGE: "00d060b30ff3b2971af5afd999ce93d5043cc05918ce70455e1087df641467fc",
    },
}


# Matching algorithms in the cryptography package
BACKEND_ALGORITHMS = {
    "SHA-256": hashes.SHA256,
    "SHA-224": hashes.SHA224,
    "SHA-512": hashes.SHA512,
    "SHA-384": hashes.SHA384,
    "SHA-512/224": hashes.SHA512_224,
    "SHA-512/256": hashes.SHA512_256,
}


def _describe(message: bytes) -> str:
    if len(message) <= 16:
        return repr(message)
    return f"{len(message)}-byte message"


# ============================================================================
# Self Test
# ============================================================================

def run_self_test(names: Optional[list] = None) -> Dict[str, int]:
    """
    Check every variant against its known answers.

    Args:
        names: Variant names to test (default: all)

    Returns:
        Dictionary mapping canonical variant name to number of vectors passed

    Raises:
        SelfTestError: On the first digest that does not match
    """
    variants = [get_variant(n) for n in names] if names else list(VARIANTS.values())
    results = {}

    for variant in variants:
        passed = 0
        for message, expected in KNOWN_ANSWERS[variant.name].items():
            actual = variant.hexdigest(message)
            if actual != expected:
                logger.error("%s self test failed for %s", variant.name, _describe(message))
                raise SelfTestError(
                    f"{variant.name} self test failed for {_describe(message)}: "
                    f"expected {expected}, got {actual}"
                )
            passed += 1
        results[variant.name] = passed

    logger.info("SHA-2 self test passed: %d variant(s), %d vector(s)",
                len(results), sum(results.values()))
    return results


def backend_hexdigest(name: str, data: bytes) -> str:
    """Hash data with the cryptography package's implementation of a variant."""
    variant = get_variant(name)
    h = hashes.Hash(BACKEND_ALGORITHMS[variant.name]())
    h.update(bytes(data))
    return h.finalize().hex()


def cross_check(name: str, data: bytes) -> str:
    """
    Hash data with both this package and the cryptography backend.

    Returns:
        The hex digest, when both agree

    Raises:
        SelfTestError: If the two implementations disagree
    """
    variant = get_variant(name)
    ours = variant.hexdigest(data)
    theirs = backend_hexdigest(variant.name, data)

    if ours != theirs:
        logger.error("%s disagrees with backend for %s", variant.name, _describe(bytes(data)))
        raise SelfTestError(
            f"{variant.name} mismatch for {_describe(bytes(data))}: "
            f"computed {ours}, backend {theirs}"
        )
    return ours
