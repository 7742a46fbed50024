from __future__ import annotations

from _infra import banner

from kungfu import Nothing, Some

from focal import Eq, MonoidAll, MonoidSum, at_map, id_, modify, replace, view


def main() -> None:
    banner("02_todos: traversals, filters and keyed updates on plain dicts")

    todos = [
        {"text": "Write some good examples for Optics", "completed": False},
        {"text": "Make some coffee", "completed": False},
        {"text": "Review the release notes", "completed": True},
    ]

    completed = id_().array().prop("completed")
    open_texts = id_().array().filter(lambda todo: not todo["completed"]).prop("text")

    print(f"open:          {view(open_texts, todos)}")
    print(f"all done:      {completed.concat_all(MonoidAll, bool)(todos)}")

    done = replace(completed, True)(todos)
    print(f"after replace: {view(completed, done)}")
    print(f"all done:      {completed.concat_all(MonoidAll, bool)(done)}")

    shouted = modify(open_texts, str.upper)(todos)
    print(f"shouted:       {view(id_().array().prop('text'), shouted)}")

    banner("02_todos: keyed access")

    tally = {"coffee": 2, "tea": 1}
    print(f"coffee:        {view(id_().key('coffee'), tally)}")
    print(f"juice:         {view(id_().key('juice'), tally)}")
    print(f"juice += 1:    {modify(id_().key('juice'), lambda n: n + 1)(tally) is tally} (unchanged)")

    juice = id_().at_key("juice")
    print(f"insert juice:  {replace(juice, Some(3))(tally)}")
    print(f"drop tea:      {replace(id_().at_key('tea'), Nothing())(tally)}")

    loose = at_map(id_(), "COFFEE", eq=Eq.by(str.casefold))
    print(f"COFFEE:        {view(loose, tally)}")
    print(f"total cups:    {id_().record().concat_all(MonoidSum, int)(tally)}")


if __name__ == "__main__":
    main()
