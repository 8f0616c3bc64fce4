class ValidationError(Exception):
    pass


class Order:
    def __init__(
        self,
        *,
        id: int | None = None,
        name: str = "",
        cake_type: str = "",
        fillings: list[str] | None = None,
    ) -> None:
        self.id = id
        self.name = name
        self.cake_type = cake_type
        self.fillings = [] if fillings is None else list(fillings)

    def __repr__(self) -> str:
        return (
            f"<Order(id={self.id}, name={self.name}, "
            f"cake_type={self.cake_type}, fillings={self.fillings})>"
        )

    @property
    def is_new(self) -> bool:
        return self.id is None

    def to_dict(self) -> dict[str, str | list[str]]:
        return {
            "name": self.name,
            "cakeType": self.cake_type,
            "fillings": list(self.fillings),
        }
