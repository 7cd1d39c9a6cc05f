"""Ingredient value: free-text item name, amount and unit symbol, owned by a Recipe."""


class Ingredient:
    def __init__(self, item: str = "", amount: float = 0, unit: str = ""):
        self.item = item
        self.amount = amount
        self.unit = unit

    def __str__(self) -> str:
        return f"{self.amount} {self.unit} {self.item}"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.item, self.amount, self.unit) == (other.item, other.amount, other.unit)

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            item=d.get("item") or "",
            amount=d.get("amount", 0) or 0,
            unit=d.get("unit") or "",
        )

    def to_dict(self):
        '''Converts the Ingredient to a dictionary for JSON persistence.'''
        return {
            "item": self.item,
            "amount": self.amount,
            "unit": self.unit,
        }
