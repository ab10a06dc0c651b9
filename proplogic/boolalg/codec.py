# variable assignment <-> integer index
#
# for sorted variable names [v0, v1, ..., v(k-1)], bit i of the index is the
# value of v_i, so truth table rows run:
#
#   index  v1 v0
#     0     0  0
#     1     0  1
#     2     1  0
#     3     1  1

# truth tables are 2^k rows, refuse anything larger than this
MAX_VARIABLES = 16

class TooManyVariables(ValueError):
    def __init__(self, varnames):
        super().__init__(f'{len(varnames)} variables exceed the limit of {MAX_VARIABLES}: {", ".join(varnames)}')
        self.varnames = list(varnames)

def check_variable_count(varnames):
    if len(varnames) > MAX_VARIABLES:
        raise TooManyVariables(varnames)

def table_size(varnames):
    return 1 << len(varnames)

# eg: 2, ['A','B','C'] -> {'A':False, 'B':True, 'C':False}
def num_to_values(num:int, varnames):
    return {name: bool((num >> i) & 1) for (i, name) in enumerate(varnames)}

# eg: {'A':False, 'B':True}, ['A','B','C'] -> 2
def values_to_num(values, varnames):
    num = 0
    for (i, name) in enumerate(varnames):
        if values.get(name, False):
            num |= 1 << i
    return num

# eg: ['A','B'] -> {'A':False, 'B':False}, {'A':True, 'B':False}, ...
def assignments(varnames):
    for i in range(table_size(varnames)):
        yield num_to_values(i, varnames)
