HEART_CONTAINERS = ('BossHeartContainer', 'HeartContainer', 'HeartContainerNoAnimation')


class ItemToken:
    def __init__(self, name: str, quantity: int = 1):
        self.name = name
        self.quantity = quantity

    def __eq__(self, other):
        if not isinstance(other, ItemToken):
            return NotImplemented
        return self.name == other.name and self.quantity == other.quantity

    def __repr__(self):
        if self.quantity == 1:
            return "ItemToken(%r)" % self.name
        return "ItemToken(%r, %d)" % (self.name, self.quantity)


class ItemCollection:
    """Ordered item tokens. Order decides bottle slots and accumulation."""

    def __init__(self, items=None):
        self.items = []
        for item in items or []:
            self.add(item)

    def add(self, item, quantity: int = 1) -> None:
        if not isinstance(item, ItemToken):
            item = ItemToken(item, quantity)
        self.items.append(item)

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def count(self, name: str) -> int:
        return sum(item.quantity for item in self.items if item.name == name)

    def heart_count(self, min_health: float = 0) -> float:
        count = min_health
        for name in HEART_CONTAINERS:
            count += self.count(name)
        return count + self.count('PieceOfHeart') / 4
