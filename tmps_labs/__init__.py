"""
TMPS Labs

Design pattern laboratory works built around the Bloomify flower shop:
- solid: SRP, OCP, DIP
- creational: configuration, Builder, Factory
- structural: Adapter, Decorator, Facade
- behavioral: Observer, Strategy, Command
"""

__version__ = "1.0.0"
