"""
Swarm
Typed event channels and packs whose shared stats stay consistent.

Contents:
- EventChannel / Subscription / EventBus (weakly held subscribers)
- PackCoordinator + Rat (attack = pack size)
- Goblin horde (broker chain, king bonus)
- Property observers with veto
"""
