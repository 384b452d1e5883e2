import logging

from tmps_labs.solid.dip import EmailSender, Notification, SMSSender
from tmps_labs.solid.ocp import Circle, Square, print_area
from tmps_labs.solid.srp import Report

logger = logging.getLogger(__name__)


def run() -> None:
    """
    Public entrypoint for Lab 1.

    Prints a header for each SOLID principle, then demos it.
    """
    logger.info("Running SOLID lab")

    print("—— SRP (Single Responsibility Principle) ——")
    report = Report(title="Lab 1 - SOLID", text="Understanding SRP, OCP, and DIP")
    report.display()
    print()

    print("—— OCP (Open/Closed Principle) ——")
    print_area(Circle(radius=3))
    print_area(Square(side=4))
    print()

    print("—— DIP (Dependency Inversion Principle) ——")
    Notification(sender=EmailSender()).alert()
    Notification(sender=SMSSender()).alert()

    print("\n✅ Lab 1 finished:  SRP (Report), OCP (Shape), DIP (Notification/MessageSender).")
