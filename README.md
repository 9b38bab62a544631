# raptoroms

An in-process order management library. It models orders and execution
reports, keeps per-venue order books in splay trees and matches incoming
orders against them, ranks venues per symbol, sprays orders across
venues, runs slicing algorithms (TWAP, VWAP, participation and iceberg)
and trades baskets of securities in waves.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `raptoroms.enums`: `OrderSide`, `OrderType`, `OrderStatus`,
  `TimeInForce`, `ExecutionType` and `LiquidityIndicator` (string enums
  holding their FIX codes), plus `RoutingType`, `AlgorithmType`,
  `LotSizing`, `Rounding` and `BasketServerStatus`.
- `raptoroms.order`: the `Order` dataclass. `leaves()` is quantity minus
  cumulative quantity, `is_terminal()` is true when nothing is left, and
  `copy()` makes a child order with the same terms and a fresh `NEW`
  status.
- `raptoroms.execution`: the frozen `Execution` report.
- `raptoroms.routing_config`: `RoutingConfig`, built with
  `sor(routing_type)` or `direct(venue_name)`.
- `raptoroms.configs`: keyword-only dataclasses `OrderConfig`,
  `AlgoConfig` (start and end time in epoch seconds), `TimingContext`
  (initial delay and interval in seconds), `TWAPConfig`, `VWAPConfig`,
  `ParticipateConfig` and `IcebergConfig`.
- `raptoroms.timeutils`: `cur_time_epoch()` and `seconds_since_midnight()`.
- `raptoroms.antigaming`: `randomize(a, b)`, a random integer in `[a, b]`.
- `raptoroms.splay_tree`: `Node`, `insert(root, key)` and
  `search(root, key)` (both return the new root), and `format_tree(node)`.
- `raptoroms.price_point` and `raptoroms.order_book`: `PricePoint` price
  levels held in an `OrderBook`; `OrderBook.price_points()` yields them in
  ascending price order.
- `raptoroms.execution_service`: `ExecutionService` fills a pair of
  orders, works out the average price and passes each `Execution` to an
  optional listener callable; `cancel(order)` cancels an order.
- `raptoroms.venue_order_manager`: `VenueOrderManager.accept_order(order)`
  matches an order that removes liquidity (or both adds and removes)
  against the book for its symbol and side, then rests what is left unless
  it only removes liquidity; an IOC order that has not reached its minimum
  quantity is cancelled instead of resting.
- `raptoroms.venue_rank`: `VenueRank`, five weighted factors scored by
  `rank()`.
- `raptoroms.venue`: `Venue`, with per-symbol rankings and its own
  `VenueOrderManager`.
- `raptoroms.venue_manager`: `VenueManager` indexes venues by symbol;
  `venues(symbol)` returns them with each venue's share of the total rank
  as its execution probability; `send_order(venue_name, order)` sends
  directly and raises `VenueUnavailableError` for an unavailable venue.
- `raptoroms.latency`: `AvgLatency.latency_adjustment(hour)` blends
  historic and today's latency for an hour of the day.
- `raptoroms.routers`: `SprayRouter` splits an order across a symbol's
  venues by execution probability and delivers the children on separate
  threads, delaying faster venues so all arrive together
  (`latency_adjustments(venues)`); `ScrapingRouter` hands an order to a
  `VenueOrderManager`.
- `raptoroms.raptor`: `Raptor.send(routing_config, order)` routes
  directly or sprays; any other routing type raises `InvalidRouteError`.
- `raptoroms.algorithms`: `TWAPAlgorithm`, `VWAPAlgorithm`,
  `ParticipateAlgorithm` (timed, running on a background thread started by
  `execute()`) and `IcebergAlgorithm`; `create_algorithm(type, raptor,
  config)` builds one and raises `ValueError` for `AlgorithmType.NONE`.
  The timed algorithms read their history lists by second of the day, so
  the lists must cover the current second plus the interval.
- `raptoroms.basket`, `raptoroms.basket_wave`, `raptoroms.basket_store`,
  `raptoroms.basket_server`: baskets, their waves (`WaveStatus` flags,
  round-lot sizing), an in-memory store, and `BasketServer`, which creates
  baskets and sends waves; an unknown basket id raises
  `BasketNotFoundError`.
- `raptoroms.latch`, `raptoroms.queues`, `raptoroms.scheduler`:
  `CountDownLatch`, `BlockingQueue` (`try_pop` raises `QueueEmptyError`),
  a power-of-two `RingBuffer`, and `AlgorithmScheduler`, which runs
  callables at monotonic times on one thread and returns `Future`s.

Progress is reported through the standard `logging` module.

## Example

```python
from raptoroms.basket_server import BasketServer
from raptoroms.basket_store import BasketStore
from raptoroms.configs import OrderConfig
from raptoroms.enums import (
    AlgorithmType, BasketServerStatus, LotSizing, OrderSide, OrderType, Rounding, RoutingType,
)
from raptoroms.raptor import Raptor
from raptoroms.routing_config import sor
from raptoroms.venue import Venue
from raptoroms.venue_manager import VenueManager
from raptoroms.venue_rank import VenueRank

venue = Venue("DPa", True, ["IBM", "JPM"])
venue.set_ranking("IBM", VenueRank(0.1, 0.5, 0.1, 0.5, 0.5))
venue.set_ranking("JPM", VenueRank(0.3, 0.5, 0.5, 0.2, 0.3))
manager = VenueManager([venue])

server = BasketServer(Raptor(manager), BasketStore(), BasketServerStatus.ACTIVE)
basket = server.create_tradable_basket(
    "example-account", ["IBM", "JPM"], [2500, 7000], [OrderSide.BUY, OrderSide.BUY]
)
wave = server.create_wave(
    basket.basket_id,
    0.5,
    OrderConfig(routing_config=sor(RoutingType.SPRAY)),
    AlgorithmType.NONE,
    [315.23, 90.50],
    [OrderType.LIMIT, OrderType.LIMIT],
    LotSizing.ROUND,
    Rounding.UP,
)
print(wave.status())  # "Sent"
```

## What it does not do

Everything runs in one process and in memory. There is no FIX session or
network connection to real venues: venues are objects in the same
process, and execution reports only reach whatever listener is given to
`ExecutionService`. Baskets and waves live in `BasketStore` and are not
persisted. There is no command-line program or server.