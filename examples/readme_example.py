from atago import Modifier, Unit, do_traits_conflict, trait_influence_modifier

player = Unit("player-1", "Hero", "player")
player.set_property("health", 100)
player.set_property("attack", 20)
player.set_property("level", 1)

player.add_property_modifier("attack", Modifier.transform("iron-sword", lambda v: v + 5, 5))
player.add_property_modifier(
    "attack",
    Modifier.transform("level-bonus", lambda v: v + player.get_property_value("level", 1) * 2, 10),
)
player.update(1 / 60)
print(f"Attack with sword at level 1: {player.get_property_value('attack')}")  # 27

player.set_base_property("level", 5)
player.update(1 / 60)
print(f"Attack at level 5: {player.get_property_value('attack')}")  # 35

# Damage only touches the current value; the next update restores it from base.
player.set_property("health", 70)
print(f"Health after hit: {player.get_property_value('health')}")  # 70

player.add_trait("brave")
player.add_trait("honest")
modifier = trait_influence_modifier("brave", "attack", priority=20)
if modifier is not None:
    player.add_property_modifier("attack", modifier)
player.update(1 / 60)
print(f"Brave attack: {player.get_property_value('attack'):.1f}")  # 38.5

rival = Unit("npc-7", "Rival", "npc")
rival.add_trait("honest")
rival.add_trait("cowardly")
print(f"Traits: {player.get_traits()} vs {rival.get_traits()}")
print(f"Conflict over honesty: {do_traits_conflict(player, rival, 'honest')}")  # True
