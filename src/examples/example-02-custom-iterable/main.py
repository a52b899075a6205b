"""
Example 02: Making Objects Iterable

Any object with __iter__() can be used in a for loop.
A Container is not a sequence of values, but TraversableAdapter makes it one
without changing the container.
"""

from iteration_idioms import Container, NumberRange, TraversableAdapter, iter_values


if __name__ == "__main__":
    print("NumberRange implements __iter__() with a hand-written iterator:")
    for num in NumberRange(1, 5):
        print(f"  {num}")

    person = Container(name="John", age=30, job="developer")

    print("\nWrapping a container:")
    adapter = TraversableAdapter(person)
    for value in adapter:
        print(f"  {value}")
    print(f"list(adapter) = {list(adapter)}")
    print(f"adapter.size = {adapter.size}")

    print("\nThe same traversal as a generator:")
    print(f"  {[*iter_values(person)]}")

    print("\n✅ Iteration is a protocol, not a property of lists!")
