from seedvdom.mailbox import Mailbox


def test_send_delivers_message():
    received = []
    mailbox = Mailbox(received.append)
    mailbox.send("hi")
    assert received == ["hi"]


def test_send_keeps_order():
    received = []
    mailbox = Mailbox(received.append)
    for message in (1, 2, 3):
        mailbox.send(message)
    assert received == [1, 2, 3]


def test_shared_mailbox_reaches_same_function():
    received = []
    mailbox = Mailbox(received.append)
    other = mailbox
    mailbox.send("a")
    other.send("b")
    assert received == ["a", "b"]