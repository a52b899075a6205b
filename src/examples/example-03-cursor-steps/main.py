"""
Example 03: Stepping a Cursor by Hand

for loops call next() for you. Calling step() yourself shows what happens:
each call returns (done, value) until the cursor is exhausted, and then it
keeps saying done.
"""

from iteration_idioms import Container, begin


if __name__ == "__main__":
    person = Container(name="John", age=30, job="developer")
    cursor = begin(person)

    print(f"cursor.step() = {cursor.step()}")
    print(f"cursor.step().value = {cursor.step().value}")
    print(f"cursor.step().value = {cursor.step().value}")
    print(f"cursor.step().done = {cursor.step().done}")
    print(f"cursor.step().done = {cursor.step().done}  # still done")

    print("\nTwo cursors never share a position:")
    first, second = begin(person), begin(person)
    first.step()
    first.step()
    print(f"  first.position = {first.position}, second.position = {second.position}")

    print("\n✅ A cursor is a tiny state machine: source + position!")
