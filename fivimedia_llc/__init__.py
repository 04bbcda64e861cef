"""FiviMedia LLC Formation.

This package contains the ordering backend and admin back office for a
bilingual (English/Arabic) US LLC formation service.

High-level architecture
-----------------------

The codebase is organized around a storefront flow and a back office:

- **Storefront (public) operations**: the order wizard. A customer picks a
  state, reviews the coverage bundled into the base price, selects add-ons and
  checks out with an optional promo code. Every price shown to the customer is
  recomputed on the server from database rows.
- **Back office (admin) operations**: session-protected CRUD over orders,
  pricing, states, coverage, add-ons, promo codes, FAQs, languages, leads and
  users. Admin mutations leave an audit trail.

Core subpackages
----------------

- ``fivimedia_llc.core``:

  - Logging and monitoring configuration.
  - SQLModel entities, repositories and session management.
  - Domain enums and API I/O models.

- ``fivimedia_llc.server``:

  - The FastAPI application, routers and exception handlers.
  - Services holding the business rules (pricing, orders, audit, auth).

Typical workflow
----------------

1. ``POST /api/v1/quote`` to price a state and a set of add-ons.
2. ``POST /api/v1/promo-codes/validate`` to preview a discount.
3. ``POST /api/v1/orders`` to place the order; it starts as ``pending`` with
   an initial status-history entry.
4. Staff move the order through ``processing`` to ``completed`` (or
   ``cancelled``) via ``PUT /api/v1/admin/orders/{id}``; each transition is
   appended to the order's history.
"""
