"""Account principal generator."""

from deed_registry.generators.base import BaseGenerator

_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"


class PrincipalGenerator(BaseGenerator):
    """Generate opaque, unique account identifiers (``SP`` + 38 characters)."""

    PREFIX = "SP"
    LENGTH = 38

    def __init__(self, seed: int | None = None) -> None:
        super().__init__(seed)
        self._issued: set[str] = set()

    def generate(self) -> str:
        """Return a principal that this generator has not issued before."""
        while True:
            body = "".join(self.random.choice(_ALPHABET) for _ in range(self.LENGTH))
            principal = f"{self.PREFIX}{body}"
            if principal not in self._issued:
                self._issued.add(principal)
                return principal

    def generate_many(self, count: int) -> list[str]:
        return [self.generate() for _ in range(count)]
