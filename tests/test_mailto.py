from urllib.parse import parse_qs, urlsplit

from recruit360.mailto import (
    MAX_MAILTO_LENGTH,
    build_mailto_links,
    collect_emails,
    compose_email,
    encode_subject,
)
from recruit360.models import MODE_ECNL, Contact, Program
from recruit360.roles import CoachRole


def _bcc(link):
    # bcc is the last parameter and emails are not percent-encoded.
    return link.split("&bcc=", 1)[1].split(",")


def test_invalid_and_duplicate_emails_dropped():
    emails = ["a@x.edu", "b@x.edu", "not-an-email", "a@x.edu", "", "c@x.edu"]
    links = build_mailto_links(emails, "Hello")
    assert len(links) == 1
    assert _bcc(links[0]) == ["a@x.edu", "b@x.edu", "c@x.edu"]
    assert "not-an-email" not in links[0]


def test_no_valid_emails_gives_no_links():
    assert build_mailto_links([], "Hi") == []
    assert build_mailto_links(["nope", ""], "Hi") == []


def test_link_shape_and_subject_encoding():
    links = build_mailto_links(["a@x.edu"], "Recruiting Inquiry: Fall '25 & more")
    link = links[0]
    assert link.startswith("mailto:?subject=")
    parts = urlsplit(link)
    assert parts.scheme == "mailto"
    assert parts.path == ""
    query = parse_qs(parts.query)
    assert query["subject"] == ["Recruiting Inquiry: Fall '25 & more"]
    assert query["bcc"] == ["a@x.edu"]


def test_encode_subject_matches_encode_uri_component():
    assert encode_subject("a b&c/d'(e)!") == "a%20b%26c%2Fd'(e)!"


def test_long_list_is_split_into_batches():
    emails = [f"coach{i:03d}@university{i:03d}.edu" for i in range(150)]
    assert len(",".join(emails)) > MAX_MAILTO_LENGTH

    links = build_mailto_links(emails, "Recruiting Inquiry")

    assert len(links) > 1
    for link in links:
        assert len(link) <= MAX_MAILTO_LENGTH
    recipients = [e for link in links for e in _bcc(link)]
    assert recipients == emails


def test_batches_are_greedy():
    emails = [f"coach{i:03d}@university{i:03d}.edu" for i in range(150)]
    links = build_mailto_links(emails, "Subject")
    # Every batch but the last would overflow if it took the next email.
    taken = 0
    for link in links[:-1]:
        batch = _bcc(link)
        taken += len(batch)
        assert len(link) + 1 + len(emails[taken]) > MAX_MAILTO_LENGTH


def test_single_oversized_email_still_gets_a_link():
    huge = "x" * 2000 + "@example.com"
    links = build_mailto_links([huge, "a@x.edu"], "S")
    assert len(links) == 2
    assert _bcc(links[0]) == [huge]
    assert _bcc(links[1]) == ["a@x.edu"]


def _programs():
    return [
        Program(
            id="one",
            name="One",
            division="D1",
            coaches=(
                Contact("H", "Head Coach", "h@one.edu"),
                Contact("A", "Assistant Coach", "a@one.edu"),
                Contact("N", "Assistant Coach", ""),
            ),
        ),
        Program(
            id="two",
            name="Two",
            division="D1",
            coaches=(
                Contact("Q", "Associate Head Coach", "q@two.edu"),
                Contact("H", "Head Coach", "h@one.edu"),
            ),
        ),
    ]


def test_collect_emails_by_role():
    emails = collect_emails(_programs(), [CoachRole.HEAD])
    assert emails == ["h@one.edu"]
    emails = collect_emails(_programs(), [CoachRole.ASSISTANT, CoachRole.ASSOCIATE])
    assert emails == ["a@one.edu", "q@two.edu"]


def test_collect_emails_ecnl_ignores_roles():
    emails = collect_emails(_programs(), [CoachRole.HEAD], mode=MODE_ECNL)
    assert emails == ["h@one.edu", "a@one.edu", "q@two.edu"]


def test_compose_email():
    composition = compose_email(_programs(), subject="Hello")
    assert composition.emails == ["h@one.edu", "a@one.edu", "q@two.edu"]
    assert composition.batch_count == 1
    assert composition.role_counts[CoachRole.HEAD] == 2
    assert composition.role_counts[CoachRole.ASSOCIATE] == 1
