# Starting quarterbacks with their ESPN player ids. Used by the roster sync.
ESPN_HEADSHOT_URL = (
    "https://a.espncdn.com/combiner/i?img=/i/headshots/nfl/players/full/{espn_id}.png"
)

STARTING_QBS = [
    {"name": "Josh Allen", "team": "Buffalo Bills", "espn_id": "3918298"},
    {"name": "Tua Tagovailoa", "team": "Miami Dolphins", "espn_id": "4241479"},
    {"name": "Aaron Rodgers", "team": "New York Jets", "espn_id": "8439"},
    {"name": "Drake Maye", "team": "New England Patriots", "espn_id": "4686472"},
    {"name": "Lamar Jackson", "team": "Baltimore Ravens", "espn_id": "3916387"},
    {"name": "Joe Burrow", "team": "Cincinnati Bengals", "espn_id": "3915511"},
    {"name": "Deshaun Watson", "team": "Cleveland Browns", "espn_id": "3122840"},
    {"name": "Russell Wilson", "team": "Pittsburgh Steelers", "espn_id": "14881"},
    {"name": "C.J. Stroud", "team": "Houston Texans", "espn_id": "4432577"},
    {"name": "Anthony Richardson", "team": "Indianapolis Colts", "espn_id": "4569618"},
    {"name": "Trevor Lawrence", "team": "Jacksonville Jaguars", "espn_id": "4360310"},
    {"name": "Will Levis", "team": "Tennessee Titans", "espn_id": "4432686"},
    {"name": "Patrick Mahomes", "team": "Kansas City Chiefs", "espn_id": "3139477"},
    {"name": "Justin Herbert", "team": "Los Angeles Chargers", "espn_id": "4038941"},
    {"name": "Bo Nix", "team": "Denver Broncos", "espn_id": "4426388"},
    {"name": "Aidan O'Connell", "team": "Las Vegas Raiders", "espn_id": "4241985"},
    {"name": "Jalen Hurts", "team": "Philadelphia Eagles", "espn_id": "4040715"},
    {"name": "Dak Prescott", "team": "Dallas Cowboys", "espn_id": "2577417"},
    {"name": "Daniel Jones", "team": "New York Giants", "espn_id": "3917315"},
    {"name": "Jayden Daniels", "team": "Washington Commanders", "espn_id": "4361529"},
    {"name": "Jordan Love", "team": "Green Bay Packers", "espn_id": "4036378"},
    {"name": "Jared Goff", "team": "Detroit Lions", "espn_id": "3046779"},
    {"name": "Caleb Williams", "team": "Chicago Bears", "espn_id": "4429013"},
    {"name": "Sam Darnold", "team": "Minnesota Vikings", "espn_id": "3912547"},
    {"name": "Baker Mayfield", "team": "Tampa Bay Buccaneers", "espn_id": "3052587"},
    {"name": "Bryce Young", "team": "Carolina Panthers", "espn_id": "4429025"},
    {"name": "Derek Carr", "team": "New Orleans Saints", "espn_id": "16757"},
    {"name": "Kirk Cousins", "team": "Atlanta Falcons", "espn_id": "14880"},
    {"name": "Brock Purdy", "team": "San Francisco 49ers", "espn_id": "4361418"},
    {"name": "Matthew Stafford", "team": "Los Angeles Rams", "espn_id": "12483"},
    {"name": "Kyler Murray", "team": "Arizona Cardinals", "espn_id": "3917792"},
    {"name": "Geno Smith", "team": "Seattle Seahawks", "espn_id": "15864"},
]


def headshot_url(espn_id):
    return ESPN_HEADSHOT_URL.format(espn_id=espn_id)
