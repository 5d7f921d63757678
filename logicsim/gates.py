from enum import Enum

LOGIC = {
    "buffer": (lambda in1: in1),
    "not": (lambda in1: not (in1)),
    "and": (lambda in1, in2: in1 and in2),
    "or": (lambda in1, in2: in1 or in2),
    "xor": (lambda in1, in2: in1 != in2),
    "nor": (lambda in1, in2: not (in1 or in2)),
    "xnor": (lambda in1, in2: in1 == in2),
    "nand": (lambda in1, in2: not (in1 and in2)),
}

ARITY = {
    "input": (0, 1),
    "output": (1, 0),
    "clock": (0, 1),
    "buffer": (1, 1),
    "not": (1, 1),
    "and": (2, 1),
    "or": (2, 1),
    "xor": (2, 1),
    "nor": (2, 1),
    "xnor": (2, 1),
    "nand": (2, 1),
}


class Kind(Enum):
    INPUT = "input"
    OUTPUT = "output"
    CLOCK = "clock"
    BUFFER = "buffer"
    NOT = "not"
    AND = "and"
    OR = "or"
    XOR = "xor"
    NOR = "nor"
    XNOR = "xnor"
    NAND = "nand"

    @classmethod
    def parse(cls, name):
        """Accept a Kind, a kind name or an editor title ("Node", "Nand")."""
        if isinstance(name, cls):
            return name

        key = str(name).strip().lower()
        if key == "node":
            return cls.BUFFER
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown gate kind {name!r}") from None

    @property
    def inputs(self):
        return ARITY[self.value][0]

    @property
    def outputs(self):
        return ARITY[self.value][1]

    @property
    def has_value(self):
        return self in (Kind.INPUT, Kind.OUTPUT)

    @property
    def is_logic(self):
        return self.value in LOGIC

    @property
    def title(self):
        if self is Kind.BUFFER:
            return "Node"
        return self.value.capitalize()

    def apply(self, *inputs):
        if not self.is_logic:
            raise TypeError(f"{self.title} is not a logic gate")
        if len(inputs) != self.inputs:
            raise ValueError(
                f"{self.title} gate requires exactly {self.inputs} inputs"
            )
        return bool(LOGIC[self.value](*inputs))
