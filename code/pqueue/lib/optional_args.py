# Copy the keyword arguments an instance understands onto it as attributes.
# Unknown keywords are ignored so one config dict can be handed to several
# consumers, each picking its own options. With a prefix, only keys starting
# with it are considered and the prefix is stripped from the attribute name,
# e.g. prefix='synth_' turns 'synth_seed' into instance.seed.
def process_kwargs(instance, kwargs, acceptable_kws=(), prefix=''):
    assert isinstance(acceptable_kws, (list, tuple))

    instance_kwargs = {}
    for key in kwargs:
        if not key.startswith(prefix):
            continue
        name = key[len(prefix):]
        if name in acceptable_kws:
            instance_kwargs[name] = kwargs[key]

    instance.__dict__.update(instance_kwargs)
