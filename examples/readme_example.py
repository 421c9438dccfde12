from dataclasses import dataclass, field

from dirtyproxy import build


@dataclass
class Config:
    should_work: bool
    optional: str | None = None
    complex: dict[str, int] = field(default_factory=dict)


def nested_dict_demo() -> None:
    props = build({"x": {"y": {"z": 5}}})
    print(f"all dirty: {props.is_dirty}")
    print(f"z: {props.x.y.z.get()}")

    props.x.y.z.set(8)
    print(f"z: {props.x.y.z.get()}")
    print(f"all dirty: {props.is_dirty}")

    props.x.y.z.set(5)
    print(f"all dirty after revert: {props.is_dirty}")


def dataclass_demo() -> None:
    editable = build(Config(should_work=True, complex={"depth": 1}))
    print(f"config keys: {list(editable)}")

    editable.complex.depth.set(2)
    print(f"config dirty: {editable.is_dirty} (should_work dirty: {editable.should_work.is_dirty})")


def main() -> None:
    nested_dict_demo()
    dataclass_demo()


if __name__ == "__main__":
    main()
