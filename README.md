# transit-catalogue

A small transport catalogue. It reads one JSON document that describes bus
stops, road distances between them and bus routes. It then answers the
statistics and routing requests in that document and writes the answers as
a JSON array.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

The `transit-catalogue` command reads a request document on standard input
and writes the response array on standard output:

```
transit-catalogue < requests.json > answers.json
```

It takes no options besides `--help`. If the input is malformed or refers to
something missing (for example a `Route` request naming an unknown stop, or
routing settings out of range), it prints `error: ...` on standard error and
exits with status 1.

### Input

The input document is an object with these keys:

- `base_requests`: `Stop` entries and `Bus` entries.
  - A `Stop` entry has `name`, `latitude`, `longitude` and `road_distances`
    (an object mapping other stop names to distances in metres). A distance
    given in one direction is also used for the reverse direction unless that
    one is given too.
  - A `Bus` entry has `name`, `stops` and `is_roundtrip`. A route that is not
    a roundtrip is travelled out and back.
- `routing_settings`: `bus_wait_time` in minutes and `bus_velocity` in km/h.
  Each value must lie between 1 and 1000.
- `stat_requests`: requests of type `Bus`, `Stop` or `Route`, each with an
  `id`. Requests of any other type are skipped and get no answer.

### Answers

- `Bus` (by `name`): `stop_count`, `unique_stop_count`, `route_length` (road
  metres) and `curvature` (road length over great-circle length).
- `Stop` (by `name`): `buses`, the names of the buses passing the stop,
  sorted.
- `Route` (from `from` to `to`): `total_time` in minutes and `items`, a list
  of `Wait` items (`stop_name`, `time`) and `Bus` items (`bus`,
  `span_count`, `time`).

Every answer carries `request_id`. When the bus or stop asked about does not
exist, or no route connects the two stops, the answer is
`"error_message": "not found"`.

Numbers of floating type are printed with six significant digits.

## Library use

```python
from transit_catalogue.jsonnode import loads, dumps
from transit_catalogue.catalogue import TransportCatalogue
from transit_catalogue.json_reader import JsonReader
from transit_catalogue.transport_router import TransportRouter

reader = JsonReader(loads(text))
catalogue = TransportCatalogue()
reader.make_catalogue(catalogue)
router = TransportRouter(catalogue, reader.route_settings())
print(dumps(reader.request_document(catalogue, router)))
```

`JsonReader` also accepts a root `Node`, JSON text or a text stream.

Modules:

- `transit_catalogue.jsonnode`: `Node`, `Document`, `load`, `loads`, `dump`,
  `dumps` and `ParsingError`; a strict JSON reader and an indented printer.
- `transit_catalogue.builder`: a chaining `Builder` for JSON nodes
  (`start_dict`, `key`, `value`, `end_dict`, `start_array`, `end_array`,
  `build`).
- `transit_catalogue.domain`: `Coordinates`, `compute_distance`, `Stop`,
  `Bus`, `BusStat`, `RouteSettings`, `StopId`.
- `transit_catalogue.graph`: `DirectedWeightedGraph`, `Edge`, and an
  all-pairs shortest-path `Router` returning `RouteInfo`.
- `transit_catalogue.catalogue`: `TransportCatalogue` with stops, buses,
  road distances and `bus_stat`.
- `transit_catalogue.transport_router`: `TransportRouter` and `RouteWeight`
  for fastest journeys with waits and bus rides.
- `transit_catalogue.request_handler`: `RequestHandler`, name-based bus and
  stop queries over a catalogue.

## What it does not do

The package does not draw route maps: `render_settings` in the input is
ignored, and `Map` requests are skipped without an answer.