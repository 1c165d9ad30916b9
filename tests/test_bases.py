import pytest

from sc2kit.bases import GameMap
from sc2kit.cluster import Alliance, Point2D, Unit, UnitCluster
from sc2kit.expansions import BaseLocation


def mineral(tag, x, y, name="MineralField", contents=1800, snapshot=False):
    return Unit(
        tag=tag,
        pos=Point2D(x, y),
        name=name,
        has_minerals=True,
        mineral_contents=contents,
        is_snapshot=snapshot,
    )


def geyser(tag, x, y):
    return Unit(tag=tag, pos=Point2D(x, y), name="VespeneGeyser", has_vespene=True)


def loc(units, x, y):
    return BaseLocation(UnitCluster(units), Point2D(x, y))


def line_map():
    return GameMap(
        [
            loc([mineral(1, 0, 0)], 0, 0),
            loc([mineral(2, 20, 0)], 20, 0),
            loc([mineral(3, 50, 0)], 50, 0),
        ]
    )


def test_resource_center_weights_geysers():
    m, g = mineral(1, 0, 0), geyser(2, 10, 0)
    base = GameMap([loc([m, g], 5, 5)]).bases[0]
    assert base.resource_center == UnitCluster([m, g, g, g, g]).center()
    assert base.mineral_center == m.pos
    assert base.location == Point2D(5, 5)
    assert base.minerals == [] and base.geysers == []


def test_distance_defaults_to_straight_line():
    gm = GameMap([loc([mineral(1, 0, 0)], 0, 0), loc([mineral(2, 3, 4)], 3, 4)])
    expected = Point2D(0, 0).distance(Point2D(3, 4))
    assert gm.distance(0, 1) == expected
    assert gm.distance(1, 0) == expected
    assert gm.distance(1, 1) == 0


def test_pathing_queries_both_directions_and_keeps_max():
    calls = []

    def pathing(pairs):
        calls.append(list(pairs))
        return [10.0, 7.0]

    gm = GameMap([loc([mineral(1, 0, 0)], 0, 0), loc([mineral(2, 3, 4)], 3, 4)], pathing=pathing)
    a, b = gm.bases
    assert calls == [[(a.resource_center, b.resource_center), (b.resource_center, a.resource_center)]]
    assert gm.distance(0, 1) == 10.0
    assert a.walk_distance(b) == b.walk_distance(a) == 10.0


def test_pathing_shorter_than_straight_line_is_ignored():
    gm = GameMap(
        [loc([mineral(1, 0, 0)], 0, 0), loc([mineral(2, 3, 4)], 3, 4)],
        pathing=lambda pairs: [0.0, 1.0],
    )
    assert gm.distance(0, 1) == Point2D(0, 0).distance(Point2D(3, 4))


def test_natural_is_closest_other_base():
    gm = line_map()
    assert gm.bases[0].natural() is gm.bases[1]
    assert gm.bases[2].natural() is gm.bases[1]


def test_natural_of_single_base_is_none():
    gm = GameMap([loc([mineral(1, 0, 0)], 0, 0)])
    assert gm.bases[0].natural() is None


def test_nearest_base_and_predicate():
    gm = line_map()
    assert gm.nearest_base(Point2D(19.3, 1.2)) is gm.bases[1]
    assert gm.nearest_base(Point2D(19.3, 1.2)) is gm.bases[1]
    assert gm.nearest_base(Point2D(44, 0)) is gm.bases[2]
    assert gm.nearest_base_if(Point2D(1, 0), lambda b: False) is None
    assert gm.nearest_base_if(Point2D(1, 0), lambda b: b.index != 0) is gm.bases[1]


def test_nearest_self_and_enemy_bases():
    gm = line_map()
    units = [
        Unit(tag=10, pos=Point2D(0, 0), is_town_hall=True, alliance=Alliance.SELF),
        Unit(tag=11, pos=Point2D(50, 0), is_town_hall=True, alliance=Alliance.ENEMY),
    ]
    gm.update([], units, set())
    assert gm.nearest_self_base(Point2D(45, 0)) is gm.bases[0]
    assert gm.nearest_enemy_base(Point2D(1, 0)) is gm.bases[2]
    assert gm.bases[0].is_self_owned() and not gm.bases[0].is_enemy_owned()
    assert gm.bases[2].is_enemy_owned()
    assert gm.bases[1].is_unowned()


def test_update_assigns_occupants_and_next_update_clears_them():
    gm = line_map()
    far_hall = Unit(tag=20, pos=Point2D(3, 0), is_town_hall=True, alliance=Alliance.SELF)
    near_hall = Unit(tag=21, pos=Point2D(1, 0), is_town_hall=True, alliance=Alliance.ENEMY)
    gas = Unit(tag=22, pos=Point2D(2, 2), is_gas_building=True)
    mine = Unit(tag=23, pos=Point2D(1, 1), is_worker=True, alliance=Alliance.SELF)
    theirs = Unit(tag=24, pos=Point2D(1, 2), is_worker=True, alliance=Alliance.ENEMY)
    gm.update([], [far_hall, near_hall, gas, mine, theirs], set())

    base = gm.bases[0]
    assert base.town_hall is near_hall
    assert base.gas_buildings == {gas.pos: gas}
    assert base.self_workers == {23}
    assert base.other_workers == {24}

    gm.update([], [], set())
    assert base.is_unowned()
    assert base.gas_buildings == {} and base.self_workers == set() and base.other_workers == set()


def test_minerals_sorted_large_first_then_by_distance():
    base = GameMap([loc([mineral(1, 0, 0)], 0, 0)]).bases[0]
    base.update_resource(mineral(2, 2, 0, name="MineralField750"))
    base.update_resource(mineral(3, 6, 0))
    base.update_resource(mineral(4, 4, 0))
    base.update_resource(mineral(5, 1, 3, name="MineralField750"))
    assert [u.tag for u in base.minerals] == [4, 3, 2, 5]


def test_geyser_goes_to_geysers():
    base = GameMap([loc([mineral(1, 0, 0)], 0, 0)]).bases[0]
    g = geyser(9, 5, 5)
    base.update_resource(g)
    assert base.geysers == [g] and base.minerals == []


def test_update_replaces_resource_at_same_position():
    base = GameMap([loc([mineral(1, 0, 0)], 0, 0)]).bases[0]
    base.update_resource(mineral(1, 4, 0, contents=1800))
    base.update_resource(mineral(7, 4, 0, contents=900))
    assert [(u.tag, u.mineral_contents) for u in base.minerals] == [(7, 900)]


def test_snapshot_keeps_previous_contents():
    base = GameMap([loc([mineral(1, 0, 0)], 0, 0)]).bases[0]
    base.update_resource(mineral(1, 4, 0, contents=1800))
    snap = mineral(1, 4, 0, contents=0, snapshot=True)
    base.update_resource(snap)
    assert len(base.minerals) == 1
    assert base.minerals[0].is_snapshot
    assert base.minerals[0].mineral_contents == 1800
    assert snap.mineral_contents == 0


def test_conflicting_nearby_position_raises():
    base = GameMap([loc([mineral(1, 0, 0)], 0, 0)]).bases[0]
    base.update_resource(mineral(1, 4, 0))
    with pytest.raises(ValueError):
        base.update_resource(mineral(2, 4.5, 0))


def test_non_resource_raises():
    base = GameMap([loc([mineral(1, 0, 0)], 0, 0)]).bases[0]
    with pytest.raises(ValueError):
        base.update_resource(Unit(tag=5, pos=Point2D(1, 1)))


def test_unobserved_minerals_are_dropped():
    gm = GameMap([loc([mineral(1, 0, 0)], 0, 0)])
    m1, m2 = mineral(1, 3, 0), mineral(2, 0, 3)
    gm.update([m1, m2], [], {1, 2})
    assert sorted(u.tag for u in gm.bases[0].minerals) == [1, 2]
    gm.update([m1], [], {1})
    assert [u.tag for u in gm.bases[0].minerals] == [1]