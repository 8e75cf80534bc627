# linkedcollections

Small pure-Python containers built on doubly linked nodes, plus a few
plain record types. There are no dependencies outside the standard library.

## Installation

```
pip install linkedcollections
```

To run the test suite, install the test extra and run pytest:

```
pip install "linkedcollections[test]"
pytest
```

## Linked list

`linkedcollections.linked_list.LinkedList` keeps items in insertion order.
It can be built empty or from any iterable.

- `append(item)` adds an item at the end.
- `sort()` orders the items in place, ascending, with a stable bubble sort
  that compares items with `>`. The nodes stay where they are and the items
  are swapped between them.
- `insert_sorted(item)` appends the item and then sorts the whole list.
- `remove(item)` deletes the first item equal to `item` and returns `True`.
  If no item is equal to it, the list is left alone and `False` is returned.
- `list[index]` walks the nodes from the head. A negative or out-of-range
  index raises `IndexError`.
- `len()` gives the number of items and iteration yields them head to tail.
- `str()` joins the items' text forms with `", "`.

```python
from linkedcollections.linked_list import LinkedList

items = LinkedList([3, 1, 2])
items.insert_sorted(0)
print(list(items))            # [0, 1, 2, 3]
print(items.remove(2))        # True
print(items[1], len(items))   # 1 3
print(items)                  # 0, 1, 3
```

## Deque

`linkedcollections.deque.LinkedDeque` supports pushing and popping at both
ends. It can be built empty or from an iterable, whose items are pushed at
the back in order.

- `push_front(item)` and `push_back(item)` add an item at one end.
- `pop_front()` and `pop_back()` remove the end item and return it.
- `front()` and `back()` return an end item and leave it in place.
- Popping from an empty deque, or asking an empty deque for an end item,
  raises `IndexError`.
- `len()` gives the number of items, an empty deque is false, and
  iteration yields the items front to back.
- `str()` gives `"Deque: "` followed by the items separated by spaces.

```python
from linkedcollections.deque import LinkedDeque

d = LinkedDeque([1, 2])
d.push_front(0)
d.push_back(3)
print(d.front(), d.back())   # 0 3
print(d.pop_front())         # 0
print(list(d), len(d))       # [1, 2, 3] 3
print(d)                     # Deque: 1 2 3
```

## Records

`linkedcollections.records` provides three dataclasses:

- `Aluno(numero=0, nome="")` is a numbered student. Its text form is
  `Aluno #<numero>: <nome>`.
- `Nota(numero_aluno=0, valor=0.0)` is a frozen grade that belongs to a
  student number.
- `Pessoa(name="", age=0, gender=" ")` is a person. People are equal,
  ordered (`<`, `>`) and hashed by name only, so a list of them can be kept
  sorted with `LinkedList.insert_sorted`. Its text form is three lines:
  `Nome: ...`, `Idade: ...` and `Genero: ...`.

```python
from linkedcollections.linked_list import LinkedList
from linkedcollections.records import Aluno, Pessoa

print(Aluno(1, "Ana"))   # Aluno #1: Ana

people = LinkedList()
people.insert_sorted(Pessoa("Bruno", 30, "M"))
people.insert_sorted(Pessoa("Ana", 25, "F"))
print([p.name for p in people])   # ['Ana', 'Bruno']
```

## What this package does not do

It is a library only. It has no command-line program, no interactive
prompts and no storage. The record types hold data; registering students,
attaching grades to them or computing averages is left to the code that
uses the package.