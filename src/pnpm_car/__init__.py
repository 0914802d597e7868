"""pnpm-car: a pnpm wrapper that drives a little car across your terminal first."""
