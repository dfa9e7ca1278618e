"""Definitions and flags suppressed when emitting in filtered mode.

The defines are either application identity (name, version, target) that the
consuming build sets itself, or cryptography capabilities that it configures
on its own.  The flags are warnings and make-specific output/dependency
options that mean nothing outside the SDK makefiles.
"""

FILTERED_DEFINES: tuple[str, ...] = (
    "APPNAME",
    "HAVE_SWAP",
    "PRINTF\\(...\\)",
    "MAJOR_VERSION",
    "MINOR_VERSION",
    "PATCH_VERSION",
    "API_LEVEL",
    "TARGET",
    "TARGET_NAME",
    "APPVERSION",
    "SDK_NAME",
    "SDK_VERSION",
    "SDK_HASH",
    "HAVE_NES_CRYPT",
    "HAVE_ST_AES",
    "NATIVE_LITTLE_ENDIAN",
    "HAVE_CRC",
    "HAVE_HASH",
    "HAVE_RIPEMD160",
    "HAVE_SHA224",
    "HAVE_SHA256",
    "HAVE_SHA3",
    "HAVE_SHA384",
    "HAVE_SHA512",
    "HAVE_SHA512_WITH_BLOCK_ALT_METHOD",
    "HAVE_SHA512_WITH_BLOCK_ALT_METHOD_M0",
    "HAVE_BLAKE2",
    "HAVE_HMAC",
    "HAVE_PBKDF2",
    "HAVE_AES",
    "HAVE_MATH",
    "HAVE_RNG",
    "HAVE_RNG_RFC6979",
    "HAVE_RNG_SP800_90A",
    "HAVE_ECC",
    "HAVE_ECC_WEIERSTRASS",
    "HAVE_ECC_TWISTED_EDWARDS",
    "HAVE_ECC_MONTGOMERY",
    "HAVE_SECP256K1_CURVE",
    "HAVE_SECP256R1_CURVE",
    "HAVE_SECP384R1_CURVE",
    "HAVE_SECP521R1_CURVE",
    "HAVE_FR256V1_CURVE",
    "HAVE_STARK256_CURVE",
    "HAVE_BRAINPOOL_P256R1_CURVE",
    "HAVE_BRAINPOOL_P256T1_CURVE",
    "HAVE_BRAINPOOL_P320R1_CURVE",
    "HAVE_BRAINPOOL_P320T1_CURVE",
    "HAVE_BRAINPOOL_P384R1_CURVE",
    "HAVE_BRAINPOOL_P384T1_CURVE",
    "HAVE_BRAINPOOL_P512R1_CURVE",
    "HAVE_BRAINPOOL_P512T1_CURVE",
    "HAVE_BLS12_381_G1_CURVE",
    "HAVE_CV25519_CURVE",
    "HAVE_CV448_CURVE",
    "HAVE_ED25519_CURVE",
    "HAVE_ED448_CURVE",
    "HAVE_ECDH",
    "HAVE_ECDSA",
    "HAVE_EDDSA",
    "HAVE_ECSCHNORR",
    "HAVE_X25519",
    "HAVE_X448",
    "HAVE_AES_GCM",
    "HAVE_CMAC",
    "HAVE_AES_SIV",
    "APP_INSTALL_PARAMS_DATA",
)

FILTERED_CFLAGS: tuple[str, ...] = (
    "-c",
    "-Wall",
    "-Wextra",
    "-Wno-main",
    "-Werror=int-to-pointer-cast",
    "-Wno-error=int-conversion",
    "-Wimplicit-fallthrough",
    "-Wvla",
    "-Wundef",
    "-Wshadow",
    "-Wformat=2",
    "-Wformat-security",
    "-Wwrite-strings",
    "-MMD",
    "-MT",
    "-MF",
    "-o",
)

# Appended last in filtered mode; the kept flags may not all apply to every TU
UNUSED_ARGUMENT_FLAG = "-Wno-unused-command-line-argument"
