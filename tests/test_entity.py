from enginecore.entity import EntityComponent, EntityId, EntityRegistry


class Health(EntityComponent):
    def __init__(self, points=100):
        self.points = points


class Armour(EntityComponent):
    def __init__(self, rating=0):
        self.rating = rating


class Shield(Armour):
    pass


def test_created_entity_exists():
    registry = EntityRegistry()
    entity = registry.create()
    assert registry.exists(entity) is True
    assert bool(entity) is True


def test_first_entity_pinned():
    registry = EntityRegistry()
    assert registry.create() == EntityId(1, 0)


def test_destroy():
    registry = EntityRegistry()
    entity = registry.create()
    assert registry.destroy(entity) is True
    assert registry.exists(entity) is False
    assert registry.destroy(entity) is False


def test_slot_is_reused_with_new_version():
    registry = EntityRegistry()
    old = registry.create()
    registry.destroy(old)
    new = registry.create()
    assert new.index == old.index
    assert new.version == old.version + 1
    assert registry.exists(old) is False
    assert registry.exists(new) is True


def test_iteration_is_newest_first():
    registry = EntityRegistry()
    a, b, c = registry.create(), registry.create(), registry.create()
    assert list(registry) == [c, b, a]


def test_iteration_skips_destroyed():
    registry = EntityRegistry()
    a, b, c = registry.create(), registry.create(), registry.create()
    registry.destroy(b)
    assert list(registry) == [c, a]
    registry.destroy(c)
    assert list(registry) == [a]


def test_manual_walk_matches_iteration():
    registry = EntityRegistry()
    created = [registry.create() for _ in range(7)]
    walked = []
    entity = registry.first()
    while entity != registry.last():
        walked.append(entity)
        entity = registry.next(entity)
    assert walked == list(reversed(created))


def test_empty_registry_first_is_null():
    registry = EntityRegistry()
    assert registry.first() == registry.last()
    assert bool(registry.first()) is False
    assert list(registry) == []


def test_next_of_stale_entity_is_null():
    registry = EntityRegistry()
    a = registry.create()
    registry.create()
    registry.destroy(a)
    assert registry.next(a) == registry.last()


def test_many_entities_are_distinct():
    registry = EntityRegistry()
    entities = [registry.create() for _ in range(50)]
    assert len(set(entities)) == len(entities)
    assert all(registry.exists(e) for e in entities)
    assert sorted(registry, key=lambda e: e.index) == sorted(entities, key=lambda e: e.index)


def test_packed_places_version_in_high_half():
    entity = EntityId(1, 2)
    assert entity.packed() == (2 << 32) | 1
    assert EntityId(1, 2) == EntityId(1, 2)
    assert EntityId(1, 2) != EntityId(1, 3)


def test_get_or_add_component_reuses_instance():
    registry = EntityRegistry()
    entity = registry.create()
    health = registry.get_or_add_component(entity, Health, 42)
    assert health.points == 42
    again = registry.get_or_add_component(entity, Health, 7)
    assert again is health
    assert registry.get_component(entity, Health) is health


def test_get_or_add_component_keyword_arguments():
    registry = EntityRegistry()
    entity = registry.create()
    armour = registry.get_or_add_component(entity, Armour, rating=5)
    assert armour.rating == 5


def test_get_component_missing_is_none():
    registry = EntityRegistry()
    entity = registry.create()
    registry.get_or_add_component(entity, Health)
    assert registry.get_component(entity, Armour) is None


def test_get_component_matches_subclass():
    registry = EntityRegistry()
    entity = registry.create()
    shield = registry.get_or_add_component(entity, Shield, 3)
    assert registry.get_component(entity, Armour) is shield
    assert registry.get_or_add_component(entity, Armour) is shield


def test_remove_component():
    registry = EntityRegistry()
    entity = registry.create()
    registry.get_or_add_component(entity, Health)
    armour = registry.get_or_add_component(entity, Armour)
    assert registry.remove_component(entity, Health) is True
    assert registry.get_component(entity, Health) is None
    assert registry.get_component(entity, Armour) is armour
    assert registry.remove_component(entity, Health) is False


def test_components_belong_to_their_entity():
    registry = EntityRegistry()
    a, b = registry.create(), registry.create()
    registry.get_or_add_component(a, Health, 1)
    assert registry.get_component(b, Health) is None


def test_destroyed_entity_has_no_components():
    registry = EntityRegistry()
    entity = registry.create()
    registry.get_or_add_component(entity, Health)
    registry.destroy(entity)
    assert registry.get_component(entity, Health) is None
    assert registry.get_or_add_component(entity, Health) is None
    assert registry.remove_component(entity, Health) is False
    reused = registry.create()
    assert registry.get_component(reused, Health) is None