# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies: linked lists, stacks, queues, expression conversion, sorting,
a max-heap and binary search tree insertion.

## Installation

```
pip install dsakit
```

The tests use pytest, which the `test` extra installs (`dsakit[test]`).

## What is inside

| Module               | Contents                                                                      |
|----------------------|-------------------------------------------------------------------------------|
| `dsakit.linkedlist`  | `LinkedList`: singly linked list with insertion, deletion and in-place reversal |
| `dsakit.doubly`      | `DoublyLinkedList`: linked list walkable forwards and with `reversed()`       |
| `dsakit.circular`    | `CircularList`: circular singly linked list tracked through its tail          |
| `dsakit.stack`       | `ArrayStack`, `LinkedStack`, `copy_stack`, `StackOverflow`, `StackUnderflow`  |
| `dsakit.queues`      | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `CircularLinkedQueue`, `QueueFull`, `QueueEmpty` |
| `dsakit.expressions` | `is_balanced`, `is_balanced_multi`, `precedence`, `is_operator`, `infix_to_postfix`, `infix_to_prefix` |
| `dsakit.arrays`      | `BoundedArray`: fixed-capacity array with positional insert and delete        |
| `dsakit.sorting`     | `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` |
| `dsakit.heap`        | `MaxHeap`, `heap_sort`, `HeapFull`                                            |
| `dsakit.bst`         | `TreeNode`, `insert`, `in_order`                                              |

All containers support `len()` and iteration.

## Linked lists

```python
from dsakit.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.reverse()
print(items.format())   # 3 -> 2 -> 1 -> NULL
```

`LinkedList` offers `push_front`, `append`, `insert_at(index, data)`,
`pop_front`, `delete_at(index)` and `remove(data)`. Indexes are 0-based; an
index out of range raises `IndexError`, and `remove` raises `ValueError` when
the value is absent.

`DoublyLinkedList` has `push_front`, `append`, `insert_at(position, data)`
(0-based), `delete_at(n)` (counting from 1) and `pop_back`, and iterates
backwards with `reversed()`.

`CircularList` has `push_front`, `append`, `insert_after(pos, data)`,
`pop_front`, `pop_back` and `delete_at(pos)`, with positions counted from 1.
Its `format()` gives `a -> b -> TO First`, or `No nodes in the list` when empty.

## Stacks

```python
from dsakit.stack import ArrayStack, LinkedStack, copy_stack

stack = ArrayStack(10)
for value in (3, 6, 8):
    stack.push(value)
print(stack.pop())      # 8
print(stack.peek(1))    # 6, counted from the top starting at 1
print(stack.bottom())   # 3
```

`ArrayStack` raises `StackOverflow` when pushing onto a full stack and
`StackUnderflow` (a subclass of `IndexError`) when popping or reading an
empty one. `LinkedStack` is unbounded; its `peek(pos)` counts from the top
starting at 0. `copy_stack(source, destination)` moves every value of
`source` onto `destination` in the same order, leaving `source` empty.

## Queues

```python
from dsakit.queues import CircularQueue

queue = CircularQueue(100)
queue.enqueue(12)
queue.enqueue(13)
print(queue.dequeue())  # 12
```

- `ArrayQueue(size)` is a linear queue whose slots are never reused: after
  `size` enqueues it reports itself full, even if values were dequeued since.
- `CircularQueue(size)` is a ring buffer holding at most `size - 1` values.
- `LinkedQueue` and `CircularLinkedQueue` are unbounded.

Enqueueing onto a full queue raises `QueueFull`; dequeueing from an empty one
raises `QueueEmpty` (a subclass of `IndexError`).

## Expressions

```python
from dsakit.expressions import is_balanced_multi, infix_to_postfix, infix_to_prefix

is_balanced_multi("[(1+2)+{1+4}]")   # True
infix_to_postfix("A*B+C")             # "AB*C+"
infix_to_prefix("A*(B-C)*D")          # "*A*-BCD"
```

`is_balanced` checks only `(` and `)`. `is_balanced_multi` counts `()`, `{}`
and `[]` together without comparing bracket kinds. The converters work on
single-character operands and the operators `+ - * /`.

## Arrays

`BoundedArray(capacity, items)` holds at most `capacity` elements.
`insert(index, element)` raises `OverflowError` when full and `IndexError`
for a bad index; `delete(index)` removes and returns an element.

## Sorting and heaps

```python
from dsakit.sorting import merge_sort
from dsakit.heap import MaxHeap, heap_sort

merge_sort([38, 27, 43, 3, 9, 82, 10])   # [3, 9, 10, 27, 38, 43, 82]

heap = MaxHeap([20, 15, 30, 8, 10, 50, 16])
heap.push(25)
heap.pop_max()                            # 50
heap_sort([20, 15, 30])                   # [15, 20, 30]
```

Every sort returns a new ascending list and leaves its input untouched.
`MaxHeap` has a default capacity of 100; pushing beyond it raises `HeapFull`,
and `pop_max` on an empty heap raises `IndexError`.

## Binary search trees

```python
from dsakit.bst import TreeNode, insert, in_order

root = TreeNode(5)
for key in (3, 8, 1):
    insert(root, key)
list(in_order(root))    # [1, 3, 5, 8]
```

`insert` returns the root (a new node when given `None`) and raises
`ValueError` for a key already in the tree.

## What it does not do

dsakit is a library only: it has no command-line program. Trees support
insertion and in-order traversal, but not deletion or search.