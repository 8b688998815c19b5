# config.py
# ==========================================
#   USER DASHBOARD (INPUT DATA)
# ==========================================

# --- 1. DATABASE ---
# Overridden by the DATABASE_URL environment variable (see app.create_app)
DATABASE_URL = 'sqlite:///eps_cases.db'
DB_RETRIES = 5
DB_RETRY_WAIT = 2  # seconds

# --- 2. DECK DEFAULTS ---
# ENDSCALE present in RUNSPEC
ENDSCALE = False
# SCALECRS: 'YES' -> three point saturation scaling
SCALECRS = 'NO'
# Prefix used for imbibition (hysteresis) endpoint arrays, e.g. IKRW, IPCW
IMBIBITION_PREFIX = 'I'

# --- 3. BROOKS-COREY PARAMETERS ---
# Pc = pe * Se^(-1/alpha)
BC_PE = 1000.0     # Entry pressure (Pa)
BC_ALPHA = 2.0     # Pore size distribution index

# Regularization thresholds
PC_LOW_SW = 0.05   # Pc regularized below this Sw
KRN_LOW_SW = 0.15  # Krn regularized below this Sw
KRW_HIGH_SW = 0.85 # Krw regularized above this Sw

# --- 4. OUTPUT ---
OUTPUT_DIR = 'results'


# Runs the mock resolution case from run_eps
if __name__ == "__main__":
    print("Loading Endpoint Scaling Resolver...")
    try:
        import run_eps
        run_eps.main()
    except ImportError as e:
        print("Error: Could not find 'run_eps.py'. Make sure it is in the same folder.")
        print(e)
