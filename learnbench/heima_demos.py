"""Small class exercises: operators, polymorphism, templates and a staff roster."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Generic, TypeVar

T = TypeVar("T")
A = TypeVar("A")


@dataclass(frozen=True)
class Pair:
    """Two numbers that add component-wise."""

    num_a: int = 0
    num_b: int = 0

    def __add__(self, other: Pair) -> Pair:
        if not isinstance(other, Pair):
            return NotImplemented
        return Pair(self.num_a + other.num_a, self.num_b + other.num_b)

    def __str__(self) -> str:
        return f"numA:{self.num_a} numB:{self.num_b}"


class Counter:
    """An integer that counts upwards one step at a time."""

    def __init__(self, value: int = 0):
        self.value = value

    def increment(self) -> Counter:
        """Add one and return this counter, so calls can be chained."""
        self.value += 1
        return self

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@total_ordering
@dataclass(frozen=True)
class Ranked:
    """A number compared by value."""

    value: int

    def __lt__(self, other: Ranked) -> bool:
        if not isinstance(other, Ranked):
            return NotImplemented
        return self.value < other.value


class Drink(ABC):
    """A drink described by its preparation steps."""

    title = ""

    @property
    @abstractmethod
    def steps(self) -> tuple[str, ...]:
        """The preparation steps, in order."""

    def make(self) -> list[str]:
        """Return the title line followed by the numbered steps."""
        return [self.title, *(f"{n}.{step}" for n, step in enumerate(self.steps, start=1))]


class Tea(Drink):
    title = "茶的制作过程："

    @property
    def steps(self) -> tuple[str, ...]:
        return ("煮水", "放茶叶", "倒入杯中", "加柠檬")


class Coffee(Drink):
    title = "咖啡的制作过程："

    @property
    def steps(self) -> tuple[str, ...]:
        return ("煮水", "将咖啡豆粉碎后冲泡", "倒入杯中", "加牛奶")


@dataclass(frozen=True)
class Part:
    """A computer part of some brand and kind, such as an Intel CPU."""

    brand: str
    kind: str

    def work(self) -> str:
        return f"{self.brand} {self.kind}工作"


class Computer:
    """A machine assembled from a CPU, a GPU and RAM."""

    def __init__(self, cpu: Part, gpu: Part, ram: Part):
        self.cpu = cpu
        self.gpu = gpu
        self.ram = ram

    def work(self) -> list[str]:
        """Let each part work in order: CPU, GPU, RAM."""
        return [self.cpu.work(), self.gpu.work(), self.ram.work()]


@dataclass(frozen=True)
class NamedAge(Generic[T, A]):
    """A name and an age of any types."""

    name: T
    age: A

    def describe(self) -> str:
        return f"name:{self.name} age:{self.age}"


def selection_sort_desc(items: Iterable[Any]) -> list[Any]:
    """Return the items ordered from largest to smallest."""
    result = list(items)
    for i in range(len(result)):
        best = max(range(i, len(result)), key=lambda j: result[j])
        if result[best] > result[i]:
            result[i], result[best] = result[best], result[i]
    return result


class Worker(ABC):
    """Someone on the staff, with an id, a name and a department id."""

    duty = ""

    def __init__(self, worker_id: int, name: str, dept_id: int):
        self.id = worker_id
        self.name = name
        self.dept_id = dept_id

    @abstractmethod
    def department(self) -> str:
        """The name of the post."""

    def info(self) -> str:
        return (
            f"职工编号:{self.id}\t职工姓名:{self.name}"
            f"\t岗位:{self.department()}\t岗位职责: {self.duty}"
        )


class Staff(Worker):
    duty = "完成经理交给的任务"

    def department(self) -> str:
        return "员工"


class Manager(Worker):
    duty = "完成老板交给的任务,并交给员工"

    def department(self) -> str:
        return "经理"


class Boss(Worker):
    duty = "管理公司"

    def department(self) -> str:
        return "老板"