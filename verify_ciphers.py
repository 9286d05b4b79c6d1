"""
Dgcrypt — Cipher Verification Script

Run this to verify every method works correctly:
    python verify_ciphers.py
"""

import base64
import time

from dgcrypt import (
    CipherFactory, Dgcrypt, DecryptionFailedError, SecureRandom,
)
from dgcrypt.config import configure_logging


def _flip_middle_byte(payload: str) -> str:
    raw = bytearray(base64.b64decode(payload))
    raw[len(raw) // 2] ^= 0xFF
    return base64.b64encode(bytes(raw)).decode("ascii")


def main():
    configure_logging()

    print("╔══════════════════════════════════════════════════╗")
    print("║      Dgcrypt — Cipher Verification Suite         ║")
    print("╚══════════════════════════════════════════════════╝")
    print()

    key = SecureRandom.generate_key()

    # ── Test 1: Basic encrypt/decrypt ────────────────────────────
    print("━━━ Test 1: Encrypt → Decrypt Round-Trip ━━━━━━━━━━")
    test_messages = [
        "Hello, World!",
        "",                                      # empty
        "\x00" * 100,                            # null chars
        "héllo wörld ✓ 🔐",                       # multi-byte
        "A" * 10_000,                            # 10 KB
        "a" * 1_000_000,                         # 1 MB
    ]
    all_pass = True

    for name in CipherFactory.list_ciphers():
        codec = Dgcrypt(name, key=key)
        ok = True
        for msg in test_messages:
            try:
                encrypted = codec.encrypt(msg, reset_iv=True)
                if codec.decrypt(encrypted) != msg:
                    ok = False
                    break
            except Exception as exc:
                print(f"  ❌ {name:<25s} ERROR: {exc}")
                ok = False
                break

        if ok:
            info = CipherFactory.get_info(name)
            print(
                f"  ✅ {name:<25s}  "
                f"key={info['key_bits']:>3d}bit  "
                f"iv={info['iv_bytes']:>2d}B  "
                f"tag={info['tag_bytes']:>2d}B"
            )
        else:
            print(f"  ❌ {name:<25s}  FAILED")
            all_pass = False

    print()

    # ── Test 2: Tamper detection ─────────────────────────────────
    print("━━━ Test 2: Tamper Detection ━━━━━━━━━━━━━━━━━━━━━━")
    message = "Test tamper detection"
    for name in CipherFactory.list_ciphers():
        codec    = Dgcrypt(name, key=key)
        tampered = _flip_middle_byte(codec.encrypt(message, reset_iv=True))

        try:
            result = codec.decrypt(tampered)
        except DecryptionFailedError:
            print(f"  ✅ {name:<25s}  Tamper detected correctly")
            continue

        if result == message:
            print(f"  ⚠️  {name:<25s}  Tampered data decrypted intact!")
            all_pass = False
        elif CipherFactory.is_aead(name):
            print(f"  ⚠️  {name:<25s}  NO tamper detection!")
            all_pass = False
        else:
            print(f"  ➖ {name:<25s}  Garbage output (no integrity)")

    print()

    # ── Test 3: Different keys cannot decrypt ────────────────────
    print("━━━ Test 3: Wrong Key Rejection ━━━━━━━━━━━━━━━━━━━")
    key2 = SecureRandom.generate_key()
    for name in CipherFactory.list_ciphers():
        encrypted = Dgcrypt(name, key=key).encrypt("Secret message")

        try:
            result = Dgcrypt(name, key=key2).decrypt(encrypted)
        except DecryptionFailedError:
            print(f"  ✅ {name:<25s}  Wrong key rejected")
            continue

        if result == "Secret message":
            print(f"  ⚠️  {name:<25s}  Decrypted with wrong key!")
            all_pass = False
        else:
            print(f"  ➖ {name:<25s}  Garbage output (no integrity)")

    print()

    # ── Test 4: Benchmark ────────────────────────────────────────
    print("━━━ Test 4: Performance Benchmark (1 MB) ━━━━━━━━━━")
    data_1mb = "x" * (1024 * 1024)

    for name in CipherFactory.list_ciphers():
        codec = Dgcrypt(name, key=key)

        t0 = time.perf_counter()
        enc = codec.encrypt(data_1mb, reset_iv=True)
        t_enc = time.perf_counter() - t0

        t0 = time.perf_counter()
        codec.decrypt(enc)
        t_dec = time.perf_counter() - t0

        enc_speed = 1.0 / t_enc if t_enc > 0 else 9999
        dec_speed = 1.0 / t_dec if t_dec > 0 else 9999
        print(
            f"  {name:<25s}  "
            f"enc={enc_speed:>7.1f} MB/s  "
            f"dec={dec_speed:>7.1f} MB/s  "
            f"total={(t_enc + t_dec) * 1000:>7.1f}ms"
        )

    print()
    print("━━━ Summary ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
    print(f"  Total methods tested: {len(CipherFactory.list_ciphers())}")
    print(f"  Recommended:          {CipherFactory.recommend()}")
    if all_pass:
        print("  Result:               🎉 ALL TESTS PASSED")
    else:
        print("  Result:               ⚠️  SOME TESTS FAILED")
    print()
    return 0 if all_pass else 1


if __name__ == "__main__":
    raise SystemExit(main())
