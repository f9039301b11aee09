"""Internal constants shared across the library."""

import hashlib

DEFAULT_HOST_URL = "http://127.0.0.1:8899"
USER_AGENT = "nearme-proof/0.1"

# ------------------------------------------------------------------
# Coordinates  (degrees × 1,000,000)
# ------------------------------------------------------------------

COORDINATE_SCALE = 1_000_000
LAT_MIN = -90 * COORDINATE_SCALE
LAT_MAX = 90 * COORDINATE_SCALE
LNG_MIN = -180 * COORDINATE_SCALE
LNG_MAX = 180 * COORDINATE_SCALE

# ------------------------------------------------------------------
# Address derivation
# ------------------------------------------------------------------

PROOF_SEED = b"proof"
MAX_SEED_LEN = 32
MAX_SEEDS = 16
MAX_MERCHANT_ID_LEN = MAX_SEED_LEN
PDA_MARKER = b"ProgramDerivedAddress"
ADDRESS_LEN = 32

#: Default program id when ``NEARME_PROGRAM_ID`` is not configured.
DEFAULT_PROGRAM_ID: bytes = hashlib.sha256(b"nearme_contract").digest()

# ------------------------------------------------------------------
# Record / event layouts
# ------------------------------------------------------------------

DISCRIMINATOR_LEN = 8
ACCOUNT_DISCRIMINATOR: bytes = hashlib.sha256(b"account:LocationProof").digest()[:DISCRIMINATOR_LEN]
EVENT_DISCRIMINATOR: bytes = hashlib.sha256(b"event:LocationVerifiedEvent").digest()[:DISCRIMINATOR_LEN]

# lat (i64) + lng (i64) + verified_at (i64) + bump (u8)
PROOF_PAYLOAD_LEN = 8 + 8 + 8 + 1
PROOF_RECORD_LEN = DISCRIMINATOR_LEN + PROOF_PAYLOAD_LEN

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
