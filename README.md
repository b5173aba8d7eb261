# graphserve

graphserve builds simple undirected graphs (no self-loops, no parallel edges)
and analyses them. It can:

- fill a graph with a chosen number of random edges from a seed, so the same
  seed always gives the same graph;
- decide whether a graph has an Eulerian circuit and, if so, produce one;
- run a few classic algorithms on it: a minimum spanning tree (Prim, every edge
  weighing 1), a Hamiltonian circuit search from vertex 0, strongly connected
  components (Kosaraju) and a maximum clique search;
- serve all of this to clients over plain-text TCP connections.

It has no dependencies outside the standard library.

## Command line

Generate a random graph and look for an Eulerian circuit:

    graphserve-euler -v 6 -e 10 -s 42

`-v` is the number of vertices (must be greater than 0), `-e` the number of
edges (0 or more, and no more than `v * (v - 1) / 2`) and `-s` the seed
(default 0). Option values are read like C's `atoi`: a leading integer, or 0.
The program prints the adjacency matrix, then either the circuit or
`Graph is not Eulerian.` Bad or missing options print a usage line to standard
error and exit with status 1.

The edges for this command are drawn with `graphserve.rng.GlibcRandom`; the
servers and `Graph.generate_random_undirected` use `graphserve.rng.MT19937`.
The same seed therefore gives different graphs here and in the servers.

## Servers

    graphserve-euler-server [--port PORT]

listens on port 9090 by default and serves one client at a time. After a
welcome message, each request the client sends has the form
`<vertices> <edges> <random_seed>`, for example `6 10 42`. The server answers
with the labelled adjacency matrix of the generated graph and its Eulerian
circuit if it has one, or with `Error: ...` for an invalid request. Sending
`exit` or `q` makes the server reply `Goodbye!` and close the connection.

    graphserve-algorithm-server [--port PORT]

listens on port 9091 by default and serves one client at a time. It prompts
for a graph request in the same format, then for an algorithm name — `mst`,
`hamilton`, `scc` or `maxclique` (also `clique`), in any letter case — and
replies with the result. An unknown name is reported and asked for again.
The client may then send another graph. At either prompt, `exit` closes the
session and `q` closes it and stops the server. The same server can be run
from Python with `graphserve.algorithm_server.AlgorithmServer(port).start()`
and stopped with `stop()`.

`graphserve.thread_server.ThreadServer` (default port 9092) serves each
client on its own thread: it reads one graph request, replies with the results
of all four algorithms and closes the connection. An invalid request, `exit`
or `q` closes the connection without results.

## Library use

```python
from graphserve.graph import Graph
from graphserve.euler import is_eulerian, eulerian_circuit
from graphserve.algorithms import create_algorithm

g = Graph(3)
g.add_edge(0, 1)
g.add_edge(1, 2)
g.add_edge(2, 0)

print(is_eulerian(g))        # True
print(eulerian_circuit(g))   # [0, 1, 2, 0]

print(create_algorithm("hamilton").run(g))
# Hamiltonian Circuit Found:
# 0 1 2 0
```

`Graph` also offers `remove_edge`, `has_edge`, `degree`, `neighbors`,
`adjacency_matrix`, `copy`, `format_matrix` and `format_adjacency`;
`len(graph)` is its number of vertices. `graphserve.euler` also provides
`reachable(graph, start)` and `is_connected(graph)`.

Errors: a non-positive size or a self-loop raises `ValueError`; a vertex out of
range raises `IndexError`; adding an existing edge, removing a missing one, or
asking `generate_random_undirected` for more edges than fit raises
`graphserve.graph.GraphError`, as does `eulerian_circuit` on a graph without an
Eulerian circuit. `create_algorithm` raises `ValueError` for an unknown name.

## What it does not do

There is no command that starts the multithreaded server; start
`ThreadServer(port).start()` from Python. No client program is included: use
any line-based TCP client, such as `telnet` or `nc`.

## Tests

The test suite uses pytest; install the `test` extra to get it.