# Printable ASCII, all half width, rasterized from Sarasa Term SC.
BUILTIN_GLYPHS = (
    (" ", (-32.000000, 0.000000, 0.000000, 0.000000, 0.000000, 0.000000, 0.000000, 0.000000, 0.000000, 0.000000)),
    ("!", (-27.687500, 0.153072, 0.083712, -3.049398, 0.005655, -1.810784, -0.375900, -0.034486, -0.108238, -0.202099)),
    ('"', (-27.671875, 2.566176, 0.122190, -2.032932, 0.075350, -0.864137, -2.685735, -0.016573, -1.201202, 0.092894)),
    ("#", (-18.093750, -0.366140, 0.402446, -5.778388, -0.019004, -6.350002, 0.116994, -0.181468, 0.148199, 0.192067)),
    ("$", (-18.960938, 0.381606, 0.295505, -6.314242, 0.238307, -5.032045, 0.090663, -0.072012, -0.248507, -0.080546)),
    ("%", (-17.656250, 0.521049, 0.519682, -3.425048, 0.848369, -6.567137, -0.180730, -0.137714, -0.070680, 0.215259)),
    ("&", (-19.843750, -0.451876, 0.441400, -5.071281, 0.444430, -5.632273, 1.096957, -0.298243, -0.389327, -0.146957)),
    ("'", (-29.851562, 1.274990, 0.044846, -1.519175, 0.025806, -0.423975, -1.323533, -0.010575, -0.901554, -0.108267)),
    ("(", (-25.070312, -0.179685, 0.072743, -4.226068, -0.005199, -1.347678, -0.124397, -1.219271, 0.111271, -0.849313)),
    (")", (-25.046875, -0.187074, 0.226566, -4.132155, 0.004431, -1.303859, -0.108054, 1.182301, 0.106552, 0.575849)),
    ("*", (-26.734375, 2.531234, 0.130946, -2.618505, 0.064653, -2.245230, -3.664769, -0.056583, -1.232644, -0.030322)),
    ("+", (-27.835938, -0.120207, 0.092381, -2.292573, -0.001408, -3.551126, 0.276549, -0.078877, 0.065600, -0.080121)),
    (",", (-29.164062, -2.126778, 0.086702, -2.005311, -0.080844, 0.519470, 0.864870, 0.067713, 1.503859, -0.209316)),
    ("-", (-29.851562, -0.065538, 0.056504, -0.867311, -0.001408, -1.984897, 0.186637, -0.052203, 0.026943, 0.006492)),
    (".", (-30.421875, -1.011232, 0.029897, -1.115903, -0.019085, -0.223716, 1.142172, -0.004576, 0.715049, -0.072178)),
    ("/", (-25.585938, -0.203722, 0.162807, -3.297990, -1.539253, -1.539445, -0.069962, 0.099356, -0.031454, -0.025581)),
    ("0", (-19.375000, 0.446021, 0.460914, -3.159883, -0.047313, -6.233440, -0.185610, -0.262044, -0.115228, 0.275479)),
    ("1", (-26.125000, 0.926521, -0.079960, -3.800699, 0.296921, -2.481578, -0.942908, 0.181746, -0.450515, 0.846323)),
    ("2", (-23.171875, 0.132234, 0.233747, -3.491340, -0.537179, -2.804240, -0.016471, 0.114277, -0.068887, -0.013109)),
    ("3", (-22.796875, 0.200516, -1.060608, -3.513437, -0.036830, -3.416266, 0.128429, 0.920007, -0.247994, 1.192726)),
    ("4", (-24.132812, -0.268562, -0.194082, -4.148728, 0.111756, -4.893866, 1.009882, -0.287851, -0.095038, 1.162668)),
    ("5", (-21.843750, 0.542205, 0.842696, -3.325612, 0.645371, -4.266465, -0.197154, -0.243413, -0.125037, -0.217509)),
    ("6", (-22.726562, -0.949528, 0.758947, -3.574204, 0.094181, -5.027889, 1.275183, -0.584171, -0.096499, -0.607358)),
    ("7", (-25.476562, 1.450719, -0.662002, -3.507912, -0.459557, -2.083646, -0.762941, 0.515639, -0.318104, 0.985762)),
    ("8", (-20.421875, 0.288087, 0.342227, -4.618291, -0.004735, -5.274710, 0.013473, -0.161544, -0.315211, 0.133299)),
    ("9", (-22.765625, 1.573469, -0.187715, -3.646019, 0.169756, -4.681046, -1.681783, 0.286937, -0.125990, 0.759409)),
    (":", (-28.843750, -0.590174, 0.059794, -2.231806, -0.014166, -1.497428, 0.176183, -0.025056, 0.417316, -0.144356)),
    (";", (-27.578125, -1.712216, 0.113609, -3.126738, -0.073439, -0.751253, -0.099595, 0.046090, 1.210719, -0.274277)),
    ("<", (-27.406250, -0.130908, -0.070727, -1.988738, -0.003484, -3.715560, 0.245948, -0.171300, 0.059391, 0.089090)),
    ("=", (-27.687500, -0.121531, 0.127444, -1.745670, 0.000000, -3.739001, 0.214547, -0.109930, 0.049106, 0.018964)),
    (">", (-27.406250, -0.121995, 0.329843, -1.955592, -0.003926, -3.694419, 0.225264, -0.036171, 0.055572, -0.040955)),
    ("?", (-25.312500, 1.389435, -0.591787, -3.380854, -0.149249, -2.292413, -1.396848, 0.526491, -0.254172, 0.938740)),
    ("@", (-17.453125, -0.174052, 0.558885, -4.872407, -0.205499, -6.259057, -0.182926, -0.194182, 0.166714, 0.569745)),
    ("A", (-22.265625, -0.384896, 0.266846, -4.474660, -0.042674, -5.220045, 0.892567, -0.132697, -0.823877, 0.009057)),
    ("B", (-19.593750, 0.369113, 1.274137, -3.369806, 0.138414, -5.629320, -0.114359, -0.389657, -0.250380, 0.333273)),
    ("C", (-23.421875, 0.266863, 2.007504, -1.999786, 0.067025, -2.803266, 0.148635, -1.471554, -0.057286, -0.436893)),
    ("D", (-20.609375, 0.362096, 0.930460, -2.132369, 0.028989, -4.721627, 0.018683, -0.068627, -0.062999, 0.080986)),
    ("E", (-22.460938, 0.362861, 2.488972, -2.911291, 0.086686, -3.342021, -0.091548, -1.516960, -0.112359, -1.252205)),
    ("F", (-24.476562, 1.371431, 2.149274, -2.988631, -0.179298, -3.216630, -0.914221, -1.225676, -0.686668, -2.187794)),
    ("G", (-21.179688, -0.061635, 0.881086, -2.458301, 0.273389, -4.603578, 0.726455, -0.593764, -0.140191, 0.322677)),
    ("H", (-21.117188, 0.414544, 0.444939, -1.375544, 0.012675, -5.888223, -0.366809, -0.233001, -0.077484, 0.395705)),
    ("I", (-24.187500, 0.239964, 0.180533, -4.474660, 0.010479, -1.988788, 0.202812, -0.040681, -0.145335, -0.170450)),
    ("J", (-24.789062, -0.365011, -1.542677, -2.867097, -0.688413, -2.470557, 0.909462, 0.996825, 0.051710, 2.295300)),
    ("K", (-21.664062, 0.356033, 1.886853, -3.872515, 0.117591, -5.208298, -0.138047, -1.445287, -0.177452, -0.655992)),
    ("L", (-25.593750, -0.923295, 2.244432, -2.220757, 0.346405, -2.359938, 0.814594, -1.297573, 0.481206, -2.376696)),
    ("M", (-18.406250, 1.350361, 0.542274, -1.668330, 0.040686, -7.238306, -1.589606, -0.276051, -0.514539, 0.385285)),
    ("N", (-18.929688, 0.447730, 0.479065, -2.867097, 0.416399, -6.752536, -0.215339, -0.192991, -0.080750, 0.333734)),
    ("O", (-21.007812, 0.379488, 0.421322, -2.104748, 0.013769, -4.736576, -0.031906, -0.222900, -0.066026, 0.309816)),
    ("P", (-22.664062, 1.837856, 1.596265, -2.568786, -0.420267, -4.502777, -1.876660, -0.679979, -0.694728, -1.097693)),
    ("Q", (-19.468750, -0.978253, 0.010881, -2.949961, 0.389398, -3.853688, -0.320380, -0.504509, 0.678237, 0.892407)),
    ("R", (-20.382812, 0.924624, 1.261365, -2.977582, 0.100143, -5.571790, -0.417643, -0.659433, -0.405686, 0.547843)),
    ("S", (-22.718750, 0.274411, 0.224990, -3.513437, 0.329904, -3.469781, 0.059243, -0.018861, -0.147018, 0.110106)),
    ("T", (-25.460938, 1.561839, 0.154652, -3.817272, 0.050030, -1.979819, -0.818250, -0.034012, -0.494736, -0.189627)),
    ("U", (-21.765625, -0.054476, 0.385958, -1.568893, 0.028607, -4.795132, 0.245321, -0.198041, 0.659680, 0.354362)),
    ("V", (-23.179688, 0.715139, 0.262105, -3.817272, 0.052421, -4.416215, -0.553110, -0.114981, 0.747905, 0.040918)),
    ("W", (-19.906250, 0.003179, 0.422861, -3.458194, 0.050549, -6.621926, 0.340759, -0.215284, 1.178285, 0.183611)),
    ("X", (-22.546875, 0.327342, 0.250659, -4.331029, 0.002333, -4.304321, -0.067554, -0.091347, -0.158510, 0.027721)),
    ("Y", (-24.539062, 1.377002, 0.195181, -3.839369, 0.062966, -3.559084, -1.686085, -0.064870, -0.030778, -0.062908)),
    ("Z", (-23.351562, 0.244906, 0.236737, -4.115582, -0.651134, -2.315642, 0.225567, -0.125914, -0.182088, -0.020327)),
    ("[", (-22.742188, -0.214890, 2.780140, -3.806223, -0.075267, 0.151677, -0.322796, -1.158647, 0.085283, -3.118804)),
    ("\\", (-25.593750, -0.103387, 0.170025, -3.303514, 1.522461, -1.556870, -0.099181, -0.126896, 0.212933, -0.022591)),
    ("]", (-22.906250, -0.206061, -2.268702, -4.231592, 0.058555, 0.218389, -0.308281, 1.148073, 0.089876, 3.415210)),
    ("^", (-28.789062, 1.792508, 0.091355, -1.508126, 0.049317, -0.982663, -2.421526, -0.030383, -0.932512, 0.004016)),
    ("_", (-29.820312, -1.786733, 0.070940, -0.889408, -0.060062, 0.777963, 0.427701, 0.031054, 0.728649, 0.012472)),
    ("`", (-30.273438, 1.281634, 0.377341, -1.055136, 0.319417, 0.247545, -0.709477, 0.167055, -0.763505, -0.604757)),
    ("a", (-22.882812, -2.044169, -0.272188, -3.054922, 0.009604, -5.289057, 2.390256, 0.304261, 0.504303, 0.310065)),
    ("b", (-21.710938, -0.863091, 1.505796, -2.005311, 0.467237, -5.362862, 0.770163, -0.420108, 0.370968, -0.103511)),
    ("c", (-24.835938, -1.384317, 1.023141, -2.126844, -0.211549, -3.988225, 1.157078, -0.787506, 0.383002, -0.142766)),
    ("d", (-21.843750, -0.897785, -0.736569, -2.209709, -0.517137, -5.339458, 0.811523, 0.006587, 0.275580, 0.675821)),
    ("e", (-22.929688, -1.706877, 0.622571, -2.933388, -0.179431, -5.714520, 2.020030, -0.422397, 0.553496, -0.012721)),
    ("f", (-24.554688, 1.447436, 0.245120, -4.192922, -0.454684, -3.534565, -1.783444, -0.509512, -0.522445, -1.183809)),
    ("g", (-20.007812, -4.601786, -0.017301, -3.297990, 0.028617, -2.984084, 0.471007, -0.078044, 1.550148, 0.347994)),
    ("h", (-22.726562, -0.212798, 1.406198, -1.287155, 0.578000, -5.268217, 0.139215, -0.471167, -0.185641, -0.026379)),
    ("i", (-25.296875, -0.768052, 0.373025, -3.988524, 0.101222, -2.478750, 0.719876, -0.210152, 0.247224, -0.369772)),
    ("j", (-23.765625, -2.434944, -0.225871, -4.607243, -0.643026, -0.477951, -1.323584, 1.036065, 0.780308, 2.341824)),
    ("k", (-22.882812, -0.675447, 2.144093, -3.198553, 0.252043, -5.122835, 1.051329, -1.171199, 0.464536, -0.929968)),
    ("l", (-24.992188, -0.381748, 0.338387, -4.192922, 0.224972, -2.141264, 0.534718, 0.095957, 0.073721, -0.265732)),
    ("m", (-20.914062, -1.815744, 0.523698, -2.292573, -0.030414, -7.030564, 2.053936, -0.340365, 0.172793, 0.123905)),
    ("n", (-24.117188, -1.096497, 0.497728, -1.287155, 0.000696, -5.072948, 1.095973, -0.343601, -0.185641, 0.349921)),
    ("o", (-23.687500, -1.601338, 0.289438, -2.154466, -0.058681, -4.941063, 1.688719, -0.187663, 0.378737, 0.179082)),
    ("p", (-21.664062, -3.041747, 1.546626, -1.994262, -0.962356, -4.267579, 1.348060, 0.296564, 0.367452, -0.120423)),
    ("q", (-21.781250, -2.949914, -0.777399, -2.209709, 0.730617, -4.305420, 1.344067, -0.622644, 0.518247, 0.692734)),
    ("r", (-26.875000, -0.231429, 0.824861, -2.463825, -0.467170, -3.490445, -0.180412, -0.409141, 0.158152, -1.848484)),
    ("s", (-24.343750, -1.529653, 0.195394, -3.303514, 0.097704, -4.396863, 1.499120, -0.220578, 0.625398, 0.038654)),
    ("t", (-24.179688, -0.243258, 0.343143, -3.960903, 0.730226, -3.701440, -0.123235, -0.513858, -0.129830, -1.726683)),
    ("u", (-24.132812, -1.990543, 0.124154, -1.309253, 0.058266, -4.429024, 2.333935, -0.174800, 0.694964, 0.169813)),
    ("v", (-25.507812, -1.060046, 0.182197, -2.845000, -0.006952, -4.296026, 1.360911, -0.133564, 1.038488, 0.050100)),
    ("w", (-23.234375, -1.954892, 0.297169, -2.508019, -0.040788, -5.579309, 2.802272, -0.204906, 1.194064, 0.140004)),
    ("x", (-24.820312, -1.406142, 0.194155, -3.375330, -0.037798, -4.350866, 1.577819, -0.106498, 0.685004, 0.021228)),
    ("y", (-24.085938, -2.333444, 0.411166, -4.038242, -0.221094, -3.441071, 1.018816, 0.042772, 1.898888, -0.523097)),
    ("z", (-24.726562, -1.385258, 0.200135, -3.375330, -0.324105, -3.633438, 0.749318, 0.132319, 0.634341, 0.006793)),
    ("{", (-23.804688, -0.203985, 0.034213, -5.098903, -0.000923, -1.509071, -0.122314, -0.880701, 0.121482, -0.307164)),
    ("|", (-25.820312, -0.151578, 0.128558, -4.369699, -0.002932, -1.530989, -0.072253, -0.032672, 0.107182, -0.310366)),
    ("}", (-23.812500, -0.210658, 0.306226, -5.038136, -0.004737, -1.456795, -0.130692, 0.826880, 0.126706, -0.126843)),
    ("~", (-27.789062, -0.437989, 0.137138, -1.265058, -0.016172, -3.733959, 1.073460, -0.124296, 0.129772, 0.056805)),
)
