# sc2kit

Helpers for StarCraft II bots in Python, using only the standard library.
The package does two jobs:

* **Map analysis.** It groups units into clusters, finds the best town hall
  tile for each resource cluster, tracks bases and who owns them, and works
  with placement, pathing and terrain-height grids.
* **Preparing games.** It reads `ExecuteInfo.txt` property files, locates
  the installed executable and its version folders, picks a ladder map,
  parses the command-line settings, builds launch arguments and port
  layouts, starts and kills game processes, and gathers replay files.

## Map analysis

### Points, units and clusters (`sc2kit.cluster`)

`Point2D(x, y)` is a frozen point. It has `distance(other)` and the cheaper
squared form `distance2(other)`. A `Unit` is a plain dataclass for an
observed unit. Its fields include `tag`, `pos`, `unit_type`, `name`,
`alliance` (an `Alliance` enum), `radius`, resource flags and contents, and
the `is_structure`, `is_town_hall`, `is_gas_building` and `is_worker` flags.

`cluster(units, distance)` goes through the units in order. Each unit joins
the cluster whose centre is nearest, unless that centre is more than
`distance` away, in which case the unit starts a new cluster. Each result is
a `UnitCluster`. A `UnitCluster` offers `add(unit)`, `clear()`, `center()`
(the origin when empty), `count()`, `len()`, iteration, and a `units`
tuple.

```python
from sc2kit.cluster import Point2D, Unit, cluster

units = [Unit(tag=1, pos=Point2D(10, 10)), Unit(tag=2, pos=Point2D(11, 10))]
for group in cluster(units, 15):
    print(group.count(), group.center())
```

### Density-based clustering (`sc2kit.dbscan`)

`DBSCAN` takes a mapping from tag to unit, which it holds as `units`.
`cluster(min_pts, eps)` returns the list of clusters and the list of units
that had fewer than `min_pts` neighbours within `eps` when they were
visited.

```python
from sc2kit.dbscan import DBSCAN

scan = DBSCAN({u.tag: u for u in units})
clusters, outliers = scan.cluster(min_pts=3, eps=4.0)
```

### Grids and terrain (`sc2kit.grid`)

`ByteGrid(width, height, data=None)` stores one byte per tile. A read outside
the grid returns 0, and a write outside it is ignored. `from_bools(rows)`
builds a grid from rows indexed by y, turning true into 255 and false into 0.
The grid also has `get`, `set`, `in_bounds` and `copy`.

`HeightMap(byte_grid)` decodes terrain heights as `(value - 127) / 8`. Tiles
outside the grid read as `-127 / 8`. `interpolate(x, y)` returns the
bilinear interpolation at fractional coordinates.

`compute_depth(placement, pathing)` starts from the cells marked 255 in
`pathing`. Those that are also buildable in `placement` are set to 0. From
there, depth values spread outward, one step lower per tile. The function
returns the depth grid and the lowest value it assigned. It raises
`ValueError` when the two grids differ in size. `compute_openness(placement,
pathing)` returns `255 - depth` for every tile.

### Base locations (`sc2kit.expansions`)

`calculate_base_locations(resources, placement)` does three things:

1. It clusters the resources, ignoring 450-mineral walls.
2. It marks the tiles around minerals and geysers as unbuildable. The
   `placement` grid is changed in place.
3. It searches outward from each cluster's centre for the nearest tile where
   a town hall centre fits.

It returns one `BaseLocation(resources, location)` per cluster.

`debug_boxes(locations, placement, pathable, height_map)` turns the marked
grid and the chosen locations into coloured `DebugBox` values. The colours
come from `base_loc_color`: white for buildable, blue for too close to a
resource for a centre, red for blocked by a resource, and green for
pathable only. `mark_unbuildable` and `expand_unbuildable` are the two
marking steps, and you can call them on their own.

### Tracking bases (`sc2kit.bases`)

`GameMap(locations, start_location=Point2D(), pathing=None)` builds one
`Base` for each `BaseLocation`. The distance between two bases starts as the
straight-line distance between their resource centres. If you pass
`pathing`, the map calls it with a list of `(start, end)` pairs that asks
each pair in both directions. The callable returns one distance per pair,
and the map keeps the largest value it sees for each pair of bases.

Call `update(resources, units, observed_tags)` once per step. It does the
following:

* It records mineral fields and geysers on their nearest base.
* It drops minerals that are no longer observed.
* It assigns town halls, gas buildings and worker tags to the nearest base.

```python
home = game_map.nearest_self_base(position)
enemy = game_map.nearest_enemy_base(position)
natural = home.natural()
print(home.walk_distance(natural), natural.is_unowned())
```

`nearest_base(pos)` is memoised per half tile. `nearest_base_if(pos,
predicate)` applies a filter of your own. Each `Base` exposes
`resource_center`, `mineral_center`, `minerals`, `geysers`, `location`,
`town_hall`, `gas_buildings`, `self_workers` and `other_workers`. It also
has `is_self_owned()`, `is_enemy_owned()` and `is_unowned()`.

### Building placement (`sc2kit.placement`)

`unit_placement_size(unit)` estimates a structure's `(width, height)`
footprint from its position and radius. The result is cached per unit type.

`PlacementGrid(raw, units=())` copies the raw placement grid. Call
`update(units)` whenever structures change. It frees the footprint of any
structure that has gone, moved or changed size, and it blocks the footprint
of any new structure. `can_place(unit, pos)` reports whether a footprint of
that unit's size is entirely free at `pos`. `debug_boxes(height_map)`
outlines every tracked footprint.

## Preparing games

### Settings (`sc2kit.settings`)

`Settings` is a dataclass with these fields:

* the computer opponent: `computer_opponent`, `computer_race`,
  `computer_difficulty`, `computer_build`
* the game: `map_name` (defaults to a random ladder map), `executable`
  (defaults to `default_executable()`), `realtime`, `connect_timeout` (in
  seconds, default 120)
* the ladder: `game_port`, `start_port`, `ladder_server`, `opponent_id`

`parse_args(argv=None)` reads these from a command line, starting from the
defaults. `build_parser(settings)` returns an `argparse` parser whose
defaults come from `settings`.

Each flag works with one or two dashes:

* `ComputerOpponent`, `ComputerRace`, `ComputerDifficulty`, `ComputerBuild`
* `map`, `executable`, `realtime`, `timeout`
* `GamePort`, `StartPort`, `LadderServer`, `OpponentId`

Boolean flags may be given with or without a value. `timeout` takes a
duration such as `2m`, `1h30m` or `250ms`.

```python
from sc2kit.settings import AIBuild, Difficulty, Race, Settings, build_parser

settings = Settings()
settings.set_computer(Race.ZERG, Difficulty.HARD, AIBuild.RUSH)
build_parser(settings).parse_args(["--map", "EverDream506.SC2Map"], namespace=settings)
```

`parse_race`, `parse_difficulty` and `parse_build` accept the protocol
spellings, such as `Zerg`, `VeryHard` and `RandomBuild`. For races the first
letter may be lower case. Any other name raises `ValueError`.

### Property files (`sc2kit.properties`)

`read_properties(path)` parses `key = value` lines into a `Properties` dict.
It skips keys that start with `#`. `Properties` adds three accessors:

* `get_string(key, default)` returns the raw value.
* `get_int(key, default)` returns 0 for a value that does not parse.
* `get_float(key, default)` returns 0.0 for a value that does not parse.

Each accessor returns `default` when the key is absent.

### Finding the game (`sc2kit.process`)

* `default_executable(environ=None, platform=None)` looks at `SC2PATH`, then
  at the `executable` entry in the user's `Starcraft II/ExecuteInfo.txt`.
  From there it picks the newest version folder that holds the executable.
  It returns `""` when nothing is found.
* `sc2_path(path)` returns the install root above a `Versions` directory, or
  `""` if there is none.
* `process_path_for_build(path, build)` points at the executable in
  `Versions/Base<build>`. A build of 0 returns `path` unchanged.
* `get_subdirs`, `bin_path` and `user_directory` are the helpers that
  `default_executable` uses. On Windows, `user_directory` queries the
  registry with `reg`.

### Maps, ports, processes and replays

* `sc2kit.maps`:
  * `random_1v1_map(rng=None)` picks a map from `CURRENT_MAP_POOL` and adds
    `.SC2Map`. Earlier pools are also available as tuples.
  * `map_path(map_name, sc2_root, platform=None)` returns the bare name on
    Windows, and `<root>/Maps/<name>` elsewhere.
* `sc2kit.launch`:
  * `setup_ports(num_agents, start_port, participants=None)` lays out the
    shared, server and client ports. It returns an empty `Ports` when at
    most one player takes part.
  * `launch_args(net_address, port, data_version="", extra_args=())` builds
    the game's command line.
  * `working_directory(path, platform=None)` returns the `Support` or
    `Support64` folder on Windows, and `None` elsewhere.
  * `start_process(path, args, platform=None)` returns the new process id,
    or 0 if the process could not start.
  * `kill_all(pids)` returns the ids that were signalled.
* `sc2kit.replay`:
  * `collect_replays(path)` returns a single replay's absolute path, or
    every replay file in a directory sorted by name. It raises `OSError` if
    the directory cannot be read.
  * `is_replay_file(extension)` compares an extension with `.SC2Replay`,
    ignoring case.

## What it does not do

sc2kit does not speak the game's network protocol, so it cannot:

* connect to a running game
* create or join a match
* start a replay
* step an agent or issue commands

It also has no command-line program of its own. Observations, pathing
answers and unit lists come from whatever client you pair it with. The
launch helpers start the executable, but they do not attach to it.