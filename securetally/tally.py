"""
Encrypted vote tallying on top of the Paillier engine.

Votes are binary (0 or 1), encrypted client-side under the tally public key
and summed homomorphically; only the holder of the private key learns the
total, never an individual vote.
"""

from typing import Iterable, Optional

from anyio import to_thread
from pydantic import BaseModel, ConfigDict, Field

from securetally.crypto.encoding import Ciphertext
from securetally.crypto.paillier import PrivateKey, PublicKey, add_cipher, decrypt, encrypt, generate_key
from securetally.crypto.randomness import RandomSource


# ── Models ─────────────────────────────────────────
class VoteChoice(BaseModel):
    plaintext: int = Field(ge=0, le=1, description="Binary vote: 0 or 1")


class EncryptedVote(BaseModel):
    model_config = ConfigDict(frozen=True)

    question_id: str = Field(min_length=1, max_length=64)
    key_id: str = Field(min_length=1, max_length=64)
    ciphertext: str = Field(min_length=2, pattern=r"^([0-9a-f]{2})+$")

    def ciphertext_bytes(self) -> Ciphertext:
        return Ciphertext(bytes.fromhex(self.ciphertext))


class TallyResult(BaseModel):
    question_id: str
    key_id: str
    count: int
    aggregate_ciphertext: Optional[str] = None
    total: Optional[int] = None


# ── Operations ─────────────────────────────────────
def encrypt_vote(
    pub: PublicKey,
    choice: int,
    *,
    question_id: str,
    key_id: str,
    random: Optional[RandomSource] = None,
) -> EncryptedVote:
    """Validate a binary vote and encrypt it under `pub`."""
    vote = VoteChoice(plaintext=choice)
    ciphertext = encrypt(pub, vote.plaintext, random)
    return EncryptedVote(question_id=question_id, key_id=key_id, ciphertext=ciphertext.hex())


def aggregate_votes(
    pub: PublicKey,
    votes: Iterable[EncryptedVote],
    *,
    question_id: str,
    key_id: str,
) -> TallyResult:
    """Homomorphic sum of the votes cast for a question/key pair."""
    agg: Optional[Ciphertext] = None
    count = 0
    for vote in votes:
        if vote.question_id != question_id or vote.key_id != key_id:
            continue
        ct = vote.ciphertext_bytes()
        agg = ct if agg is None else add_cipher(pub, agg, ct)
        count += 1

    if agg is None:
        return TallyResult(question_id=question_id, key_id=key_id, count=0, total=0)
    return TallyResult(question_id=question_id, key_id=key_id, count=count, aggregate_ciphertext=agg.hex())


def tally_votes(
    priv: PrivateKey,
    votes: Iterable[EncryptedVote],
    *,
    question_id: str,
    key_id: str,
) -> TallyResult:
    """Aggregate the votes, then decrypt the sum with the private key."""
    result = aggregate_votes(priv.public_key, votes, question_id=question_id, key_id=key_id)
    if result.aggregate_ciphertext is None:
        return result
    total = decrypt(priv, Ciphertext(bytes.fromhex(result.aggregate_ciphertext)))
    return result.model_copy(update={"total": total.to_int()})


async def generate_key_async(random: Optional[RandomSource] = None, bits: Optional[int] = None):
    """Run key generation in a worker thread so the event loop stays responsive."""
    return await to_thread.run_sync(generate_key, random, bits)
