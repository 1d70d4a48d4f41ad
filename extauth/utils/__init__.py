from .common import digest_matches, env_flag, random_salt, sha256_hex, utc_timestamp

__all__ = ["utc_timestamp", "random_salt", "sha256_hex", "digest_matches", "env_flag"]
