from __future__ import annotations

from _infra import Person, banner, family

from focal import MonoidSum, id_, modify, replace, view
from focal._helpers import identity

# Built once, reused for every Person.
children = id_().prop("children").array()
child_names = children.prop("name")
grandchildren = children.prop("children").array()
grandchild_ages = grandchildren.prop("age")


def birthday(p: Person) -> Person:
    return modify(id_().prop("age"), lambda age: age + 1)(p)


def main() -> None:
    banner("01_quickstart: prop + array + modify on frozen dataclasses")

    jackie = family()

    print(f"children:      {view(child_names, jackie)}")
    print(f"grandchildren: {view(grandchildren.prop('name'), jackie)}")

    older = modify(grandchild_ages, lambda age: age + 1)(jackie)
    print(f"ages before:   {view(grandchild_ages, jackie)}")
    print(f"ages after:    {view(grandchild_ages, older)}")

    renamed = replace(child_names, "Brandon Jr.")(jackie)
    print(f"renamed:       {view(child_names, renamed)}")

    # identity updates hand back the very same object
    print(f"no-op is same: {modify(grandchild_ages, identity)(jackie) is jackie}")

    total = grandchild_ages.concat_all(MonoidSum, identity)
    print(f"total age:     {total(jackie)} -> {total(modify(grandchildren, birthday)(jackie))}")


if __name__ == "__main__":
    main()
