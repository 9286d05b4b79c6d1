from .random_gen import SecureRandom, Nonce

__all__ = ["SecureRandom", "Nonce"]
