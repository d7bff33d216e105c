import matplotlib

# headless backend for plot tests
matplotlib.use("Agg")
