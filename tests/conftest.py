from hypothesis import HealthCheck, settings

# The first from_regex draw builds Hypothesis's charmap cache (~2s on a cold
# checkout), which trips the too_slow health check unrelated to the code.
settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("default")
