from typing import Iterator, List

from leaderboard.console import Colors, ColorPresenter, ConsoleSession, PlainPresenter
from leaderboard.heap import PriorityHeap
from leaderboard.models import Entry


def _scripted(lines: List[str]):
    it: Iterator[str] = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return read_line


def _run(lines: List[str], heap: PriorityHeap = None):
    heap = heap if heap is not None else PriorityHeap("max")
    out: List[str] = []
    code = ConsoleSession(heap, PlainPresenter(out.append), read_line=_scripted(lines)).run()
    return code, out, heap


def test_add_view_find_remove_flow() -> None:
    code, out, heap = _run(
        [
            "1", "Ian 1300",
            "1", "Faker 1400",
            "1", "Chovi 1350",
            "1", "Zeus 1300",
            "2",
            "4", "Zeus",
            "4", "Nobody",
            "5",
            "0",
        ]
    )
    assert code == 0
    assert out.count("User added successfully.") == 4
    assert "Top User: Faker, Rank: Grandmaster, Power: 1400" in out
    assert "Found User: Zeus, Rank: Grandmaster, Power: 1300" in out
    assert "User 'Nobody' not found." in out
    assert "Successfully removed Faker" in out
    assert out[-1] == "Exiting the program..."
    assert heap.size() == 3
    assert heap.peek_top().name == "Chovi"


def test_malformed_record_reprompts() -> None:
    code, out, heap = _run(["1", "justaname", "Ruler 640", "0"])
    assert code == 0
    assert "Invalid input. Try again." in out
    assert heap.find_by_name("Ruler").rank == "Platinum"


def test_empty_leaderboard_messages() -> None:
    code, out, heap = _run(["2", "5", "0"])
    assert code == 0
    assert out.count("Leaderboard is empty.") == 2
    assert heap.is_empty()


def test_listing_uses_heap_order() -> None:
    heap = PriorityHeap("max")
    for name, score in [("a", 1), ("b", 2), ("c", 3)]:
        heap.insert(Entry(name=name, score=score))
    code, out, _ = _run(["3", "0"], heap)
    listing = next(block for block in out if block.startswith("LEADERBOARD"))
    rows = listing.splitlines()[2:]
    assert [r.split()[0] for r in rows] == ["c", "a", "b"]


def test_non_integer_choice_exits_with_error_code() -> None:
    code, out, _ = _run(["abc"])
    assert code == 1
    assert out[-1] == "Invalid choice! Try again..."


def test_unknown_choice_continues() -> None:
    code, out, _ = _run(["9", "0"])
    assert code == 0
    assert "Invalid choice. Please try again." in out


def test_end_of_input_exits_cleanly() -> None:
    code, _, _ = _run([])
    assert code == 0
    code, _, heap = _run(["1"])
    assert code == 0
    assert heap.is_empty()


def test_color_presenter_wraps_output() -> None:
    out: List[str] = []
    presenter = ColorPresenter(out.append)
    presenter.error("bad")
    presenter.success("good")
    assert out[0] == f"{Colors.RED}bad{Colors.END}"
    assert out[1] == f"{Colors.GREEN}good{Colors.END}"
    assert presenter.prompt("> ").startswith(Colors.CYAN)
