"""A small contact book with a fixed capacity and an interactive menu."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
from enum import IntEnum

PEOPLE_MAX = 5
PHONE_LENGTH = 11
MIN_AGE_EXCLUSIVE = 3
MAX_AGE_EXCLUSIVE = 150

TABLE_HEADER = "序号\t姓名\t性别\t年龄\t电话号码\t家庭住址\t"

MENU = "\n".join(
    [
        "*************************",
        "*******1.新增联系人******",
        "*******2.显示联系人******",
        "*******3.删除联系人******",
        "*******4.查找联系人******",
        "*******5.修改联系人******",
        "*******6.清空联系人******",
        "*******0.退出通讯录******",
        "*************************",
    ]
)


class Sex(IntEnum):
    MALE = 1
    FEMALE = 2

    @property
    def label(self) -> str:
        return "男" if self is Sex.MALE else "女"


@dataclass(frozen=True)
class Contact:
    id: int
    name: str
    sex: Sex
    age: int
    phone: str
    address: str


class BookFullError(Exception):
    """Raised when a contact is added to a full book."""


def _check_sex(sex: int) -> Sex:
    try:
        return Sex(sex)
    except ValueError:
        raise ValueError(f"sex must be 1 or 2, not {sex!r}") from None


def _check_age(age: int) -> int:
    if not MIN_AGE_EXCLUSIVE < age < MAX_AGE_EXCLUSIVE:
        raise ValueError(f"age must be between {MIN_AGE_EXCLUSIVE} and {MAX_AGE_EXCLUSIVE}, exclusive")
    return age


class AddressBook:
    """Contacts numbered from 1 in insertion order; ids close up after a delete."""

    _FIELDS = ("name", "sex", "age", "phone", "address")

    def __init__(self, capacity: int = PEOPLE_MAX):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._contacts: list[Contact] = []

    def _check_phone(self, phone: str, exclude_id: int | None = None) -> str:
        if len(phone) != PHONE_LENGTH:
            raise ValueError(f"phone number must have {PHONE_LENGTH} characters")
        if any(c.phone == phone and c.id != exclude_id for c in self._contacts):
            raise ValueError("phone number already exists")
        return phone

    def _index(self, contact_id: int) -> int:
        if not 1 <= contact_id <= len(self._contacts):
            raise KeyError(contact_id)
        return contact_id - 1

    def add(self, name: str, sex: int, age: int, phone: str, address: str) -> Contact:
        """Validate and append a contact; return it with its new id."""
        if len(self._contacts) >= self.capacity:
            raise BookFullError("通讯录已满")
        contact = Contact(
            id=len(self._contacts) + 1,
            name=name,
            sex=_check_sex(sex),
            age=_check_age(age),
            phone=self._check_phone(phone),
            address=address,
        )
        self._contacts.append(contact)
        return contact

    def find_by_name(self, name: str) -> list[Contact]:
        """Contacts whose name contains ``name``."""
        return [c for c in self._contacts if name in c.name]

    def find_by_phone(self, phone: str) -> list[Contact]:
        """Contacts whose phone number equals ``phone``."""
        return [c for c in self._contacts if c.phone == phone]

    def delete(self, contact_id: int) -> Contact:
        """Remove a contact by id, renumber those after it, and return it."""
        index = self._index(contact_id)
        removed = self._contacts.pop(index)
        self._contacts[index:] = [replace(c, id=c.id - 1) for c in self._contacts[index:]]
        return removed

    def modify(self, contact_id: int, **kwargs) -> Contact:
        """Change some fields of a contact after validating them; return the new contact."""
        index = self._index(contact_id)
        unknown = set(kwargs) - set(self._FIELDS)
        if unknown:
            raise TypeError(f"unknown contact fields: {', '.join(sorted(unknown))}")
        if "sex" in kwargs:
            kwargs["sex"] = _check_sex(kwargs["sex"])
        if "age" in kwargs:
            _check_age(kwargs["age"])
        if "phone" in kwargs:
            self._check_phone(kwargs["phone"], exclude_id=contact_id)
        updated = replace(self._contacts[index], **kwargs)
        self._contacts[index] = updated
        return updated

    def clear(self) -> None:
        self._contacts.clear()

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(list(self._contacts))


def format_table(contacts: Iterable[Contact]) -> str:
    """Render contacts as a tab-separated table with a header line."""
    rows = [TABLE_HEADER]
    rows.extend(
        f"{c.id}\t{c.name}\t{c.sex.label}\t{c.age}\t{c.phone}\t{c.address}\t" for c in contacts
    )
    return "\n".join(rows) + "\n"


def _ask(prompt: str | None = None) -> str:
    if prompt is not None:
        print(prompt)
    return input().strip()


def _ask_int(prompt: str | None = None) -> int | None:
    try:
        return int(_ask(prompt))
    except ValueError:
        return None


def _ask_sex(prompt: str) -> int:
    value = _ask_int(prompt)
    while value not in (1, 2):
        value = _ask_int("输入有误,请重新输入")
    return value


def _ask_age(prompt: str) -> int:
    value = _ask_int(prompt)
    while value is None or not MIN_AGE_EXCLUSIVE < value < MAX_AGE_EXCLUSIVE:
        value = _ask_int("输入有误,请重新输入")
    return value


def _ask_phone(book: AddressBook, prompt: str, exclude_id: int | None = None) -> str | None:
    phone = _ask(prompt)
    while True:
        if len(phone) == PHONE_LENGTH:
            if not any(c.id != exclude_id for c in book.find_by_phone(phone)):
                return phone
            if _ask_int("已存在,是否继续输入  1-是 其他-不是") != 1:
                return None
            phone = _ask()
            continue
        phone = _ask("输入有误,请重新输入")


def _ask_id(book: AddressBook, prompt: str) -> int:
    value = _ask_int(prompt)
    while value is None or not 1 <= value <= len(book):
        value = _ask_int("没有该id,请重新输入")
    return value


def _menu_add(book: AddressBook) -> None:
    if len(book) >= book.capacity:
        print("通讯录已满")
        return
    print("*********增加联系人********\n")
    name = _ask("请输入联系人姓名")
    sex = _ask_sex("请输入联系人性别   1--男  2--女")
    age = _ask_age("请输入联系人年龄")
    phone = _ask_phone(book, "请输入联系人电话号码")
    if phone is None:
        return
    address = _ask("请输入联系人住址")
    book.add(name, sex, age, phone, address)
    print("添加成功!")


def _menu_show(book: AddressBook) -> None:
    if not len(book):
        print("通讯录为空")
        return
    print("*********显示联系人********\n")
    print(format_table(book))


def _menu_delete(book: AddressBook) -> None:
    if not len(book):
        print("通讯录为空")
        return
    book.delete(_ask_id(book, "请输入要删除的联系人id"))
    print("删除成功!")


def _menu_find(book: AddressBook) -> None:
    if not len(book):
        print("通讯录为空")
        return
    found = book.find_by_name(_ask("请输入要查找的联系人"))
    if not found:
        print("查无此人")
        return
    print(format_table(found))


def _menu_modify(book: AddressBook) -> None:
    if not len(book):
        print("通讯录为空")
        return
    contact_id = _ask_id(book, "请输入要修改的联系人id")
    while True:
        name = next(c.name for c in book if c.id == contact_id)
        choice = _ask_int(f"修改{name}信息 1-姓名 2-性别 3-年龄 4-电话号码 5-家庭住址 0-退出修改")
        if choice == 1:
            book.modify(contact_id, name=_ask("修改姓名"))
        elif choice == 2:
            book.modify(contact_id, sex=_ask_sex("修改性别   1--男  2--女"))
        elif choice == 3:
            book.modify(contact_id, age=_ask_age("修改年龄"))
        elif choice == 4:
            phone = _ask_phone(book, "修改号码", exclude_id=contact_id)
            if phone is None:
                return
            book.modify(contact_id, phone=phone)
        elif choice == 5:
            book.modify(contact_id, address=_ask("修改住址"))
        elif choice == 0:
            print("修改完成")
            return
        else:
            print("输入有误,重新输入")


def _menu_clear(book: AddressBook) -> None:
    if _ask_int("是否清空? 1-确定 其他-取消") == 1:
        book.clear()
        print("清空成功!")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive contact book on standard input and output."""
    book = AddressBook()
    actions = {
        1: _menu_add,
        2: _menu_show,
        3: _menu_delete,
        4: _menu_find,
        5: _menu_modify,
        6: _menu_clear,
    }
    print("*********欢迎光临********")
    try:
        while True:
            print(MENU)
            choice = _ask_int("选择需要的服务")
            if choice == 0:
                print("欢迎下次光临")
                return 0
            action = actions.get(choice)
            if action is None:
                print("没有此项服务")
                continue
            action(book)
    except EOFError:
        return 0