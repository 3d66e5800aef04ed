# kyberkem

Pure-Python building blocks for the Kyber key encapsulation mechanism: the
Keccak permutation with SHA-3 and SHAKE on top of it, AES-256 with the
counter-mode stream used by the "90s" flavour, a deterministic AES-256
CTR-DRBG for reproducing known-answer values, centred binomial noise
sampling, constant-time comparison, and a small benchmarking helper.

It has no dependencies outside the standard library. Everything runs in
plain Python; it is meant for study and testing, not for speed.

## Modules

| Module | Contents |
| --- | --- |
| `kyberkem.keccak` | `keccak_f1600` and the incremental `KeccakSponge` |
| `kyberkem.fips202` | `shake128`, `shake256`, `sha3_256`, `sha3_512`, `shake128_absorb_once`, `shake256_absorb_once` |
| `kyberkem.aes` | `aes256_ecb_encrypt`, `aes256ctr_prf` and the `Aes256Ctr` keystream |
| `kyberkem.rng` | the deterministic `CtrDrbg`, `SeedExpander`, `aes256_ctr_drbg_update`, `RngError` |
| `kyberkem.randombytes` | `randombytes(n)` from the operating system |
| `kyberkem.cbd` | `cbd2`, `cbd3` and `cbd(buf, eta)` |
| `kyberkem.verify` | `verify` and `cmov` |
| `kyberkem.bench` | `cpucycles`, `cpucycles_overhead`, `print_results` |

## Hashing

```python
from kyberkem.fips202 import sha3_256, sha3_512, shake128, shake256

digest = sha3_256(b"abc")          # 32 bytes
stream = shake128(b"seed", 200)    # any number of bytes
```

`shake128_absorb_once(data)` and `shake256_absorb_once(data)` return a
`KeccakSponge` that is ready to squeeze, so output can be drawn in pieces
with `squeeze(n)` or in whole blocks with `squeeze_blocks(n)`. A sponge can
also be fed incrementally:

```python
from kyberkem.keccak import SHAKE128_RATE, KeccakSponge

sponge = KeccakSponge(SHAKE128_RATE)
sponge.absorb(b"first part, ")
sponge.absorb(b"second part")
sponge.finalize(0x1F)
out = sponge.squeeze(64)
```

## AES-256

```python
from kyberkem.aes import Aes256Ctr, aes256_ecb_encrypt, aes256ctr_prf

key = bytes(32)
block = aes256_ecb_encrypt(key, bytes(16))
stream = aes256ctr_prf(100, key, bytes(12))   # counter starts at zero

ctr = Aes256Ctr(key, bytes(12))
chunk = ctr.squeeze_blocks(2)                 # 128 bytes, stream continues
```

Keys must be 32 bytes and nonces 12 bytes; anything else raises
`ValueError`.

## Deterministic randomness

`CtrDrbg` is seeded with 48 bytes of entropy (and optionally a 48-byte
personalization string) and gives the same byte stream every time. It is
callable, so it can stand in wherever a function of `n` returning bytes is
expected, just like `randombytes`.

```python
from kyberkem.rng import CtrDrbg, SeedExpander

drbg = CtrDrbg(bytes(range(48)))
first = drbg.random_bytes(32)
second = drbg(32)

expander = SeedExpander(bytes(32), bytes(8), maxlen=1000)
data = expander.expand(100)
```

`SeedExpander` raises `RngError` (a `ValueError` carrying a `code`) when
`maxlen` is not below 2**32 or a request is not smaller than what remains.

## Noise sampling and constant-time helpers

```python
from kyberkem.cbd import cbd
from kyberkem.verify import cmov, verify

coeffs = cbd(bytes(128), 2)          # 256 coefficients in [-2, 2]
equal = verify(b"abc", b"abc") == 0  # 0 means equal, 1 means different
chosen = cmov(b"aaaa", b"bbbb", 1)   # b"bbbb"
```

`cbd` needs exactly `eta * 64` input bytes, with `eta` 2 or 3.

## Benchmarking

`cpucycles()` returns a nanosecond tick count. `print_results(label,
timestamps)` prints the median and average of the intervals between
successive timestamps, less the measured reading overhead, and returns them
as a `BenchResult`; with fewer than two timestamps it prints an error to
stderr and returns `None`.

## What this package does not do

It does not contain the Kyber scheme itself: there is no modular reduction
or number-theoretic transform, no polynomial or vector packing and
compression, no key generation, encapsulation or decapsulation, and no key
exchange. The modules here are the symmetric primitives, randomness sources
and sampling such a scheme is built from. There is no command-line program.

## Running the tests

The test suite uses pytest, installed with the `test` extra:

```
pip install -e .[test]
pytest
```